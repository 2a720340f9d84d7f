from .bot_service import TelegramBotService, drain_pending_confirmations, mask_chat_id
from .error_mapping import TELEGRAM_ERROR_RULES, TelegramFailure, classify_telegram_failure

__all__ = [
    "TelegramBotService",
    "drain_pending_confirmations",
    "mask_chat_id",
    "TELEGRAM_ERROR_RULES",
    "TelegramFailure",
    "classify_telegram_failure",
]
