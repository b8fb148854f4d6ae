from app.application.utils.documents import document_request
from app.domain.entities.message import ChatMessage

SYSTEM_PROMPT = (
    "You are a helpful assistant embedded in a website chat widget.\n"
    "Answer general questions clearly and concisely.\n"
    "You can also help visitors book an appointment with the team."
)

# Every conversation starts from this exchange.
GREETING_HISTORY = (
    ChatMessage(role="user", text="Hello"),
    ChatMessage(
        role="model",
        text="Greetings! How can I help you? I can assist you with general questions or help you book an appointment if needed.",
    ),
)


def build_chat_prompt(message: str) -> str:
    return (
        f"{message}\n"
        "\n"
        "Note: If the user asks about booking appointments, calling, or scheduling, "
        "let them know I can help with that by saying phrases like 'book an appointment' or 'call me'. "
        "Please respond in plain text without any markdown formatting."
    )


def build_document_prompt(filename: str, content: str, message: str | None) -> str:
    return (
        f"Here is the content of the uploaded file \"{filename}\":\n"
        "\n"
        f"{content}\n"
        "\n"
        f"{document_request(message)}\n"
        "\n"
        "Please respond in plain text without any markdown formatting. "
        "You may use spacing and short paragraphs to keep the answer easy to read."
    )
