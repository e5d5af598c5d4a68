from django import template

from apps.core.utils import (
    format_currency,
    format_date_to_local,
    format_datetime_to_local,
)

register = template.Library()


@register.filter
def currency(value):
    """{{ tx.amount|currency }} → $5.00"""
    return format_currency(value)


@register.filter
def local_date(value):
    return format_date_to_local(value)


@register.filter
def local_datetime(value):
    return format_datetime_to_local(value)


@register.filter
def percent_of(value, top):
    """차트 막대 높이(%)"""
    try:
        top = int(top)
        if top <= 0:
            return 0
        return round(int(value) * 100 / top)
    except (TypeError, ValueError):
        return 0
