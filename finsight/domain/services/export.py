"""Serialization of transactions into downloadable export formats.

Two formats are produced:

* delimited text (CSV) with minimal quoting,
* an Excel-compatible XML Spreadsheet 2003 document.

Both serializers return ``None`` for an empty transaction list so callers
can skip delivery altogether.
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from finsight.domain.constants import (
    CSV_FORMAT,
    EXPORT_COLUMNS,
    EXPORT_MIME_TYPES,
    UNCATEGORIZED_LABEL,
    XLS_FORMAT,
)
from finsight.domain.models import INCOME, ExportPayload, Transaction
from finsight.utils.decimal_utils import coerce_decimal

AMOUNT_COLUMN = EXPORT_COLUMNS.index("Amount")

SPREADSHEET_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<?mso-application progid="Excel.Sheet"?>\n'
    '<Workbook xmlns="urn:schemas-microsoft-com:office:spreadsheet"\n'
    '  xmlns:ss="urn:schemas-microsoft-com:office:spreadsheet">\n'
    "  <Styles>\n"
    '    <Style ss:ID="header"><Font ss:Bold="1"/>'
    '<Interior ss:Color="#E2E8F0" ss:Pattern="Solid"/></Style>\n'
    '    <Style ss:ID="income"><Font ss:Color="#16A34A"/></Style>\n'
    '    <Style ss:ID="expense"><Font ss:Color="#DC2626"/></Style>\n'
    '    <Style ss:ID="number"><NumberFormat ss:Format="#,##0.00"/></Style>\n'
    "  </Styles>\n"
    '  <Worksheet ss:Name="Transactions">\n'
    "    <Table>\n"
)

SPREADSHEET_FOOTER = "    </Table>\n  </Worksheet>\n</Workbook>"


def transaction_row(transaction: Transaction) -> list[str]:
    """Render a transaction as export column values.

    Args:
        transaction: Transaction to render.

    Returns:
        list[str]: Values in ``EXPORT_COLUMNS`` order.
    """
    category = transaction.category
    return [
        transaction.date.strftime("%Y-%m-%d"),
        transaction.kind,
        (category.name if category else None) or UNCATEGORIZED_LABEL,
        format_amount(transaction.amount),
        transaction.description or "",
        "Yes" if transaction.is_recurring else "No",
        transaction.recurring_frequency or "",
    ]


def format_amount(amount: Decimal) -> str:
    """Render an amount as a plain decimal string without trailing zeros.

    ``Decimal("1E+3")`` becomes ``1000`` and ``Decimal("12.50")`` becomes
    ``12.5``; NaN renders as ``NaN``.
    """
    value = coerce_decimal(amount)
    if value.is_nan():
        return "NaN"
    return format(value.normalize(), "f")


def escape_delimited_field(value: str) -> str:
    """Quote a field when it contains a comma, a quote or a newline."""
    if "," in value or '"' in value or "\n" in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def to_delimited_text(transactions: Sequence[Transaction]) -> str | None:
    """Serialize transactions as comma-separated text.

    Args:
        transactions: Transactions to export.

    Returns:
        str | None: Header and one line per transaction joined by ``\\n``,
        or None when there is nothing to export.
    """
    if not transactions:
        return None
    lines = [_delimited_line(EXPORT_COLUMNS)]
    lines.extend(
        _delimited_line(transaction_row(transaction))
        for transaction in transactions
    )
    return "\n".join(lines)


def escape_markup_text(value: str) -> str:
    """Escape ``&`` and ``<`` for spreadsheet cell text."""
    return value.replace("&", "&amp;").replace("<", "&lt;")


def to_spreadsheet_markup(transactions: Sequence[Transaction]) -> str | None:
    """Serialize transactions as an XML Spreadsheet 2003 workbook.

    The Amount cell is numeric and styled ``income`` or ``expense`` from the
    transaction kind; all other cells are escaped strings.

    Args:
        transactions: Transactions to export.

    Returns:
        str | None: Workbook document, or None when there is nothing to
        export.
    """
    if not transactions:
        return None
    parts = [SPREADSHEET_HEADER, "      <Row>\n"]
    for header in EXPORT_COLUMNS:
        parts.append(
            '        <Cell ss:StyleID="header">'
            f'<Data ss:Type="String">{header}</Data></Cell>\n'
        )
    parts.append("      </Row>\n")

    for transaction in transactions:
        style = "income" if transaction.kind == INCOME else "expense"
        parts.append("      <Row>\n")
        for index, value in enumerate(transaction_row(transaction)):
            if index == AMOUNT_COLUMN:
                parts.append(
                    f'        <Cell ss:StyleID="{style}">'
                    f'<Data ss:Type="Number">{value}</Data></Cell>\n'
                )
            else:
                parts.append(
                    "        <Cell>"
                    f'<Data ss:Type="String">{escape_markup_text(value)}'
                    "</Data></Cell>\n"
                )
        parts.append("      </Row>\n")

    parts.append(SPREADSHEET_FOOTER)
    return "".join(parts)


def default_export_filename(fmt: str, today: date) -> str:
    """Return ``transactions-<yyyy-MM-dd>.<fmt>``."""
    return f"transactions-{today.strftime('%Y-%m-%d')}.{fmt}"


def build_export_payload(
    transactions: Sequence[Transaction],
    fmt: str,
    filename: str | None = None,
    today: date | None = None,
) -> ExportPayload | None:
    """Serialize transactions and attach MIME type and filename.

    Args:
        transactions: Transactions to export.
        fmt: ``csv`` or ``xls``.
        filename: Optional filename override.
        today: Date used for the default filename (defaults to today).

    Returns:
        ExportPayload | None: Payload for a sink, None for empty input.

    Raises:
        ValueError: If the format is not supported.
    """
    serializer = _SERIALIZERS.get(fmt)
    if serializer is None:
        raise ValueError(
            f"Unsupported export format: {fmt}. Expected csv or xls."
        )
    content = serializer(transactions)
    if content is None:
        return None
    return ExportPayload(
        content=content,
        mime_type=EXPORT_MIME_TYPES[fmt],
        filename=filename or default_export_filename(
            fmt,
            today or date.today(),
        ),
    )


def _delimited_line(values: Sequence[str]) -> str:
    return ",".join(escape_delimited_field(value) for value in values)


_SERIALIZERS = {
    CSV_FORMAT: to_delimited_text,
    XLS_FORMAT: to_spreadsheet_markup,
}


__all__ = [
    "transaction_row",
    "format_amount",
    "escape_delimited_field",
    "to_delimited_text",
    "escape_markup_text",
    "to_spreadsheet_markup",
    "default_export_filename",
    "build_export_payload",
]
