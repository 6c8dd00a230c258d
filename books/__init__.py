"""GST books: replays the voucher journal into statements, aging and financial reports."""

__version__ = "0.1.0"
