"""Domain constants for FinSight."""

EXPORT_COLUMNS = (
    "Date",
    "Type",
    "Category",
    "Amount",
    "Description",
    "Recurring",
    "Frequency",
)

UNCATEGORIZED_LABEL = "Uncategorized"

CSV_FORMAT = "csv"
XLS_FORMAT = "xls"

EXPORT_MIME_TYPES = {
    CSV_FORMAT: "text/csv;charset=utf-8;",
    XLS_FORMAT: "application/vnd.ms-excel",
}

RECURRING_FREQUENCIES = ("daily", "weekly", "monthly", "yearly")

CATEGORY_GROUPS = ("fixed", "variable", "transfers")

FALLBACK_CATEGORY_COLOR = "#6b7280"

# (name, icon, color, kind, group) seeded for every new user.
DEFAULT_CATEGORIES = (
    ("Salary", "briefcase", "#10b981", "income", "variable"),
    ("Freelance", "laptop", "#06b6d4", "income", "variable"),
    ("Investments", "trending-up", "#8b5cf6", "income", "variable"),
    ("Rent", "home", "#ef4444", "expense", "fixed"),
    ("Personal Loan EMI", "landmark", "#f97316", "expense", "fixed"),
    ("Credit Card Loan EMI", "credit-card", "#eab308", "expense", "fixed"),
    ("Gym", "dumbbell", "#ec4899", "expense", "fixed"),
    ("Food", "utensils", "#f97316", "expense", "variable"),
    ("Travel", "car", "#3b82f6", "expense", "variable"),
    ("Shopping", "shopping-bag", "#ec4899", "expense", "variable"),
    ("Entertainment", "film", "#a855f7", "expense", "variable"),
    ("Bills & Utilities", "zap", "#eab308", "expense", "variable"),
    ("Health", "heart", "#ef4444", "expense", "variable"),
    ("Savings Transfer", "piggy-bank", "#14b8a6", "expense", "transfers"),
)

# Icon tag -> display glyph used by the Streamlit interface.
ICON_VARIANTS = {
    "tag": "🏷️",
    "briefcase": "💼",
    "laptop": "💻",
    "trending-up": "📈",
    "home": "🏠",
    "landmark": "🏦",
    "credit-card": "💳",
    "dumbbell": "🏋️",
    "utensils": "🍽️",
    "car": "🚗",
    "shopping-bag": "🛍️",
    "film": "🎬",
    "zap": "⚡",
    "heart": "❤️",
    "piggy-bank": "🐷",
    "target": "🎯",
}


def resolve_icon(tag: str | None) -> str:
    """Return the glyph for an icon tag, falling back to the tag icon."""
    return ICON_VARIANTS.get(tag or "tag", ICON_VARIANTS["tag"])


__all__ = [
    "EXPORT_COLUMNS",
    "UNCATEGORIZED_LABEL",
    "CSV_FORMAT",
    "XLS_FORMAT",
    "EXPORT_MIME_TYPES",
    "RECURRING_FREQUENCIES",
    "CATEGORY_GROUPS",
    "FALLBACK_CATEGORY_COLOR",
    "DEFAULT_CATEGORIES",
    "ICON_VARIANTS",
    "resolve_icon",
]
