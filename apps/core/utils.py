"""
표시용 포맷/페이지네이션 헬퍼

금액은 DB 에 최소 단위(센트) 정수로 저장되고, 화면에 보여줄 때만
통화 문자열로 바꾼다. 모두 순수 함수라 뷰/템플릿/데이터 계층 어디서든 쓴다.
"""
import math
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP

from django.conf import settings
from django.utils import timezone

MONTH_ABBR = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
              'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']

Y_AXIS_STEP = 1000
ELLIPSIS = '...'


def to_minor_units(value):
    """None / 문자열 / Decimal 을 정수(최소 단위)로 정규화"""
    if value is None or value == '':
        return 0
    return int(Decimal(str(value)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def format_currency(amount):
    """
    최소 단위 금액 → 표시 문자열

    Example:
        format_currency(500)     → '$5.00'
        format_currency(123456)  → '$1,234.56'
        format_currency(-500)    → '-$5.00'
    """
    cents = to_minor_units(amount)
    symbol = getattr(settings, 'CURRENCY_SYMBOL', '$')
    sign = '-' if cents < 0 else ''
    major = Decimal(abs(cents)) / Decimal(100)
    return f"{sign}{symbol}{major:,.2f}"


def _as_local_datetime(value):
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime) and timezone.is_aware(value):
        value = timezone.localtime(value)
    return value


def format_date_to_local(value):
    """날짜 → 'Oct 19, 2026'"""
    if not value:
        return ''
    value = _as_local_datetime(value)
    return f"{MONTH_ABBR[value.month - 1]} {value.day}, {value.year}"


def format_datetime_to_local(value):
    """일시 → 'Oct 19, 2026, 14:05' (현재 타임존 기준)"""
    if not value:
        return ''
    value = _as_local_datetime(value)
    if not isinstance(value, datetime):
        return format_date_to_local(value)
    return f"{format_date_to_local(value)}, {value:%H:%M}"


def total_pages_for(count, per_page):
    return math.ceil(count / per_page)


def generate_pagination(current_page, total_pages):
    """
    페이지 번호 목록 생성 (중간 생략은 '...')

    - 7페이지 이하: 전부 표시
    - 앞쪽 3페이지 안: 1, 2, 3, ..., n-1, n
    - 뒤쪽 3페이지 안: 1, 2, ..., n-2, n-1, n
    - 그 외: 1, ..., p-1, p, p+1, ..., n
    """
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]

    return [
        1,
        ELLIPSIS,
        current_page - 1,
        current_page,
        current_page + 1,
        ELLIPSIS,
        total_pages,
    ]


def generate_y_axis(values):
    """
    막대 차트 y축 라벨

    최대값을 1000 단위로 올림한 값까지 1000 간격 라벨을 만든다.
    반환: (라벨 리스트(위→아래), 최상단 값)
    """
    highest = max((to_minor_units(v) for v in values), default=0)
    top = Y_AXIS_STEP * math.ceil(highest / Y_AXIS_STEP)
    labels = [format_currency(step) for step in range(top, -1, -Y_AXIS_STEP)]
    return labels, top


def parse_iso_date(value):
    """'2026-10-19' → date, 비어있거나 잘못된 값은 None"""
    if not value:
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        return None


def parse_page(value, default=1):
    """쿼리스트링 page 파라미터 → 1 이상의 정수"""
    try:
        page = int(value)
    except (TypeError, ValueError):
        return default
    return max(page, 1)
