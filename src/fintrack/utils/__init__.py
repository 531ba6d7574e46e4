"""Utility functions for fintrack."""

from fintrack.utils.date_parser import parse_date, parse_month_period
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.id_generator import IdGenerator

__all__ = ["parse_date", "parse_month_period", "parse_amount", "IdGenerator"]
