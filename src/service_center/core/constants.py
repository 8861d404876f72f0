"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_SESSION_DAYS = 7

INVALID_CREDENTIALS_MESSAGE = "Неверный логин или пароль"
UNASSIGNED_MASTER_LABEL = "Не назначен"
PERMISSION_DENIED_MESSAGE = "Недостаточно прав для этого действия"

STATUS_LABELS = {
    "pending": "Ожидает",
    "in_progress": "В работе",
    "completed": "Завершен",
}

CURRENCY_SIGN = "₽"
# ru-RU groups thousands with a non-breaking space
THOUSANDS_SEPARATOR = "\u00a0"
