#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP).

Usage:
  python3 scripts/chat_local.py

What it does:
- Keeps a stable session id for the conversation
- Sends your typed messages through the same HandleChatMessageUseCase as POST /chat
- Shows the booking step after each message and can list recorded appointments
"""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.exceptions import LLMContractError, LLMUpstreamError
from app.wiring.dependencies import (
    get_appointment_store,
    get_conversation_store,
    get_handle_chat_message_use_case,
    get_session_store,
)


def _print_header(session_id: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"session_id: {session_id}")
    print("Type your message and press Enter. Try 'book an appointment'.")
    print("Commands: /new (new session), /history, /list, /quit, /help")
    print("-" * 60)


def main() -> None:
    session_id = os.getenv("CHAT_SESSION_ID", "local_user_1")
    use_case = get_handle_chat_message_use_case()
    sessions = get_session_store()
    history_store = get_conversation_store()
    appointments = get_appointment_store()
    _print_header(session_id)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd = user_text.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /new     -> start a new session id (drops any open booking form)")
            print("  /history -> show last 10 messages")
            print("  /list    -> show recorded appointments, newest first")
            print("  /quit    -> exit")
            continue
        if cmd == "/new":
            session_id = f"local_user_{int(time.time())}"
            print(f"New session_id: {session_id}")
            continue
        if cmd == "/history":
            print("\n--- History (last 10) ---")
            for item in history_store.get_history(session_id)[-10:]:
                print(f"{item.role}: {item.text}")
            continue
        if cmd == "/list":
            items = appointments.list_appointments()
            if not items:
                print("No appointments found.")
            for i, apt in enumerate(items, 1):
                print(f"{i}. {apt.name} - {apt.email} - {apt.phone} - {apt.appointment_time} on {apt.appointment_date} ({apt.status})")
            continue

        try:
            reply = use_case.handle(session_id=session_id, message=user_text)
        except (LLMUpstreamError, LLMContractError) as e:
            print(f"ERROR: {e}")
            continue

        print("\n--- Reply ---")
        print(reply)
        session = sessions.get(session_id)
        if session is not None:
            print(f"\n(booking step: {session.step.value})")
        print("-" * 60)


if __name__ == "__main__":
    main()
