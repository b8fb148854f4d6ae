from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile

from app.api.schemas import ChatRequestSchema, ChatResponseSchema, ErrorSchema
from app.application.exceptions import InvalidUploadError, LLMContractError, LLMUpstreamError
from app.application.use_cases.generate_reply import GenerateReplyUseCase
from app.application.use_cases.handle_chat_message import HandleChatMessageUseCase
from app.application.utils.documents import check_upload_size, decode_document
from app.application.utils.message_rules import is_blank
from app.core.config import settings
from app.wiring.dependencies import get_generate_reply_use_case, get_handle_chat_message_use_case

router = APIRouter()
logger = logging.getLogger(__name__)


def get_max_upload_bytes() -> int:
    return settings.MAX_UPLOAD_BYTES


def _fallback_session_id(request: Request) -> str:
    host = request.client.host if request.client else "anonymous"
    return f"{host}_{int(time.time() * 1000)}"


@router.post(
    "/chat",
    response_model=ChatResponseSchema,
    responses={400: {"model": ErrorSchema}, 500: {"model": ErrorSchema}},
)
def chat(
    req: ChatRequestSchema,
    request: Request,
    uc: HandleChatMessageUseCase = Depends(get_handle_chat_message_use_case),
):
    if is_blank(req.message):
        raise HTTPException(status_code=400, detail="Message cannot be empty")

    session_id = req.session_id or _fallback_session_id(request)
    try:
        reply = uc.handle(session_id=session_id, message=req.message)
    except (LLMUpstreamError, LLMContractError) as e:
        logger.exception("Error processing chat", extra={"session_id": session_id, "error": str(e)})
        raise HTTPException(status_code=500, detail="Internal server error: the assistant could not respond")

    return ChatResponseSchema(response=reply)


@router.post(
    "/chat-with-file",
    response_model=ChatResponseSchema,
    responses={400: {"model": ErrorSchema}, 500: {"model": ErrorSchema}},
)
def chat_with_file(
    request: Request,
    file: UploadFile | None = File(default=None),
    message: str | None = Form(default=None),
    session_id: str | None = Form(default=None, alias="sessionId"),
    max_bytes: int = Depends(get_max_upload_bytes),
    uc: GenerateReplyUseCase = Depends(get_generate_reply_use_case),
):
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    filename = (file.filename or "").strip() or "document.txt"
    session_id = session_id or _fallback_session_id(request)
    logger.info("File upload received", extra={"session_id": session_id, "reason": filename})

    try:
        raw = file.file.read(max_bytes + 1)
        check_upload_size(max(len(raw), file.size or 0), max_bytes)
        content = decode_document(raw)
    except InvalidUploadError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        reply = uc.execute_with_document(
            session_id=session_id,
            filename=filename,
            content=content,
            message=message,
        )
    except (LLMUpstreamError, LLMContractError) as e:
        logger.exception("Error processing file chat", extra={"session_id": session_id, "error": str(e)})
        raise HTTPException(status_code=500, detail="Error processing file: the assistant could not respond")

    return ChatResponseSchema(response=reply)
