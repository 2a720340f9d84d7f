"""Localized labels for outbound notifications and caller-facing messages."""

from __future__ import annotations

DEFAULT_LOCALE = "ar-EG"

MESSAGES = {
    "ar-EG": {
        "order_header": "🛒 *طلب جديد من {store}!*",
        "product": "📦 *المنتج:* {value}",
        "price": "💰 *السعر:* {value}",
        "quantity": "🔢 *الكمية:* {value}",
        "customer": "👤 *العميل:* {value}",
        "phone": "📞 *الهاتف:* `{value}`",
        "address": "📍 *العنوان:* {value}",
        "notes": "📝 *ملاحظات:*",
        "page_url": "🌐 *رابط الصفحة:* {value}",
        "order_time": "⏰ *التاريخ:* {value}",
        "order_id": "🆔 *معرف الطلب:* {value}",
        "not_specified": "غير محدد",
        "confirmation": "✅ تم استلام طلب جديد من {name} ({phone})\n📦 المنتج: {product}\n🆔 معرف: {order_id}",
        "order_sent": "تم إرسال طلبك بنجاح",
        "telegram_api_error": "فشل إرسال الإشعار إلى التليجرام",
        "chat_not_found": "خطأ في إعدادات الخادم. الرجاء التواصل مع الدعم.",
        "bot_blocked": "البوت محظور. الرجاء التحقق من إعدادات التليجرام.",
        "invalid_token": "رمز البوت غير صالح. الرجاء التحقق من الإعدادات.",
        "network_error": "خطأ في الاتصال بخدمة التليجرام. الرجاء المحاولة لاحقاً.",
        "timeout_error": "انتهت مهلة الاتصال. الرجاء المحاولة مرة أخرى.",
        "internal_error": "حدث خطأ غير متوقع في الخادم",
    },
    "en-US": {
        "order_header": "🛒 *New order from {store}!*",
        "product": "📦 *Product:* {value}",
        "price": "💰 *Price:* {value}",
        "quantity": "🔢 *Quantity:* {value}",
        "customer": "👤 *Customer:* {value}",
        "phone": "📞 *Phone:* `{value}`",
        "address": "📍 *Address:* {value}",
        "notes": "📝 *Notes:*",
        "page_url": "🌐 *Page:* {value}",
        "order_time": "⏰ *Date:* {value}",
        "order_id": "🆔 *Order ID:* {value}",
        "not_specified": "Not specified",
        "confirmation": "✅ New order received from {name} ({phone})\n📦 Product: {product}\n🆔 ID: {order_id}",
        "order_sent": "Your order was sent successfully",
        "telegram_api_error": "Failed to deliver the notification to Telegram",
        "chat_not_found": "Server configuration error. Please contact support.",
        "bot_blocked": "The bot is blocked. Please check the Telegram settings.",
        "invalid_token": "The bot token is invalid. Please check the settings.",
        "network_error": "Could not reach the Telegram service. Please try again later.",
        "timeout_error": "The connection timed out. Please try again.",
        "internal_error": "An unexpected server error occurred",
    },
}

# Validation and configuration errors are always reported in English.
METHOD_NOT_ALLOWED = "Method not allowed. Use POST only."
MISSING_FIELDS = "Missing required fields: {fields}"
INVALID_PHONE = "Invalid phone number format"
INVALID_QUANTITY = "Quantity must be at least 1"
SERVER_CONFIG_ERROR = "Server configuration error. Please contact support."
INVALID_BODY = "Request body must be valid JSON"
PAYLOAD_TOO_LARGE = "Request body exceeds the {limit} byte limit"

WEEKDAYS = {
    "ar-EG": ["الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت", "الأحد"],
    "en-US": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
}

MONTHS = {
    "ar-EG": [
        "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
        "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
    ],
    "en-US": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
}

DAY_PERIODS = {
    "ar-EG": ("ص", "م"),
    "en-US": ("AM", "PM"),
}

ARABIC_INDIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")


def message_text(key: str, locale: str) -> str:
    msgs = MESSAGES.get(locale) or MESSAGES[DEFAULT_LOCALE]
    return msgs.get(key) or MESSAGES[DEFAULT_LOCALE].get(key, "")
