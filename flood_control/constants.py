from __future__ import annotations


APP_NAME: str = "flood_control"

# User-facing, short, user-safe messages
MSG_TOO_MANY_REQUESTS: str = "Слишком много запросов. Попробуйте чуть позже."
MSG_PONG: str = "pong"
MSG_START: str = "Привет! Я на связи. Не флуди, пожалуйста."
MSG_INTERNAL_ERROR: str = "Что-то пошло не так. Попробуй ещё раз чуть позже."
