"""
대시보드 데이터 조회 계층

뷰는 이 모듈의 함수만 호출한다. 함수마다 ORM 쿼리(파라미터 바인딩) 하나를
실행하고, 금액 포맷/페이지 계산 정도의 후처리만 한다. 호출 사이에 상태를
들고 있지 않는다.

DB 오류는 fetch_boundary 에서 로그를 남기고 DataFetchError 계열로 바꿔 올린다.
"""
import asyncio
import functools
import logging
import uuid
from dataclasses import dataclass
from datetime import timedelta

from asgiref.sync import async_to_sync
from django.contrib.auth.models import User
from django.db import Error as DatabaseError
from django.db.models import CharField, Count, F, Q, Sum
from django.db.models.functions import Cast, TruncDate
from django.utils import timezone

from apps.core.utils import format_currency, total_pages_for
from apps.members.models import Member
from apps.transactions.models import STATUS_COST, STATUS_INCOME, Transaction

from .exceptions import error_for

logger = logging.getLogger(__name__)

# 상수
ITEMS_PER_PAGE = 6
LATEST_TRANSACTIONS_LIMIT = 5
MEMBER_CHOICES_LIMIT = 10
COST_SERIES_DAYS = 14

# 거래 검색 대상 컬럼 (amount_text / date_text 는 문자열 캐스팅 annotate)
TRANSACTION_SEARCH_FIELDS = [
    'member__name',
    'member__email',
    'amount_text',
    'date_text',
    'status',
    'accountant_book',
    'tx_class',
    'sub_class',
    'title',
    'description',
]

# 페이지 수 계산은 축소된 컬럼 집합을 쓴다
TRANSACTION_PAGE_COUNT_FIELDS = [
    'member__name',
    'member__email',
    'amount_text',
    'date_text',
    'status',
]


def fetch_boundary(message):
    """
    조회 함수 실패 경계

    django.db.Error 를 잡아서 로그를 남기고, 고정 메시지를 가진
    DataFetchError 하위 타입으로 다시 올린다. 재시도/부분 결과 없음.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DatabaseError as e:
                logger.error(f"Database Error ({func.__name__}): {e}", exc_info=True)
                raise error_for(e, message, resource=func.__name__) from e
        return wrapper
    return decorator


def _search_q(query, fields):
    """대소문자 무시 부분일치 OR 조건"""
    condition = Q()
    for field in fields:
        condition |= Q(**{f'{field}__icontains': query})
    return condition


def _searchable_transactions():
    return Transaction.objects.annotate(
        amount_text=Cast('amount', output_field=CharField()),
        date_text=Cast('date', output_field=CharField()),
    )


# ============================================================
# Transactions
# ============================================================

@fetch_boundary('Failed to fetch the latest transactions.')
def fetch_latest_transactions():
    """최근 거래 5건 (멤버 정보 포함, 금액은 표시 문자열)"""
    rows = (
        Transaction.objects
        .order_by('-date')
        .values(
            'amount',
            'id',
            'title',
            'accountant_book',
            name=F('member__name'),
            image_url=F('member__image_url'),
            email=F('member__email'),
        )[:LATEST_TRANSACTIONS_LIMIT]
    )
    return [{**row, 'amount': format_currency(row['amount'])} for row in rows]


@dataclass(frozen=True)
class CardData:
    number_of_members: int
    number_of_transactions: int
    total_income: str
    total_cost: str


async def _gather_card_data(accountant_book, start_date, end_date):
    transactions = Transaction.objects.in_book(accountant_book)
    if start_date and end_date:
        transactions = transactions.by_date_range(start_date, end_date)

    # 서로 의존성 없는 쿼리 3개를 동시에 실행, 하나라도 실패하면 전체 실패
    return await asyncio.gather(
        Member.objects.acount(),
        transactions.acount(),
        transactions.aaggregate(
            income=Sum('amount', filter=Q(status=STATUS_INCOME)),
            cost=Sum('amount', filter=Q(status=STATUS_COST)),
        ),
    )


@fetch_boundary('Failed to fetch card data.')
def fetch_card_data(accountant_book, start_date=None, end_date=None):
    """
    요약 카드 데이터

    Args:
        accountant_book: 장부 (필수)
        start_date, end_date: 둘 다 있을 때만 날짜 범위(양끝 포함)로 제한

    멤버 수는 장부와 무관하게 전체 멤버 기준.
    """
    logger.debug(f"card data: book={accountant_book}, range={start_date} ~ {end_date}")

    member_count, transaction_count, sums = async_to_sync(_gather_card_data)(
        accountant_book, start_date, end_date
    )

    return CardData(
        number_of_members=member_count or 0,
        number_of_transactions=transaction_count or 0,
        total_income=format_currency(sums['income'] or 0),
        total_cost=format_currency(sums['cost'] or 0),
    )


@fetch_boundary('Failed to fetch transactions.')
def fetch_filtered_transactions(query, current_page):
    """검색어로 거래 목록 조회 (한 페이지 6건, 날짜 내림차순)"""
    current_page = max(int(current_page), 1)
    offset = (current_page - 1) * ITEMS_PER_PAGE

    rows = (
        _searchable_transactions()
        .filter(_search_q(query, TRANSACTION_SEARCH_FIELDS))
        .order_by('-date', 'id')
        .values(
            'id',
            'amount',
            'date',
            'status',
            'title',
            'accountant_book',
            name=F('member__name'),
            email=F('member__email'),
            image_url=F('member__image_url'),
        )[offset:offset + ITEMS_PER_PAGE]
    )
    return list(rows)


@fetch_boundary('Failed to fetch total number of transactions.')
def fetch_transactions_pages(query):
    """검색 결과 페이지 수 = ceil(건수 / 6)"""
    count = (
        _searchable_transactions()
        .filter(_search_q(query, TRANSACTION_PAGE_COUNT_FIELDS))
        .count()
    )
    return total_pages_for(count, ITEMS_PER_PAGE)


@fetch_boundary('Failed to fetch transaction.')
def fetch_transaction_by_id(transaction_id):
    """
    id 로 거래 1건 조회

    없으면 None (형식이 잘못된 id 도 '없음'으로 취급).
    """
    try:
        pk = uuid.UUID(str(transaction_id))
    except ValueError:
        return None
    return Transaction.objects.filter(pk=pk).first()


@fetch_boundary('Failed to fetch transactions.')
def fetch_transactions_for_export(query):
    """내보내기용: 검색 조건에 맞는 거래 전체 (페이지 제한 없음)"""
    return list(
        _searchable_transactions()
        .with_member()
        .filter(_search_q(query, TRANSACTION_SEARCH_FIELDS))
        .order_by('-date', 'id')
    )


@fetch_boundary('Failed to fetch last 14 days costs.')
def fetch_last_14_days_costs(accountant_book):
    """
    최근 14일 일별 지출 합계 (오늘 포함, 날짜 오름차순)

    지출이 없는 날도 0 으로 채워서 항상 14행을 돌려준다.
    """
    today = timezone.localdate()
    start = today - timedelta(days=COST_SERIES_DAYS - 1)

    daily = (
        Transaction.objects
        .in_book(accountant_book)
        .cost()
        .filter(date__date__gte=start, date__date__lte=today)
        .annotate(day=TruncDate('date'))
        .values('day')
        .annotate(total_cost=Sum('amount'))
        .order_by('day')
    )
    costs_by_day = {item['day']: item['total_cost'] or 0 for item in daily}

    return [
        {'date': day, 'total_cost': costs_by_day.get(day, 0)}
        for day in (start + timedelta(days=i) for i in range(COST_SERIES_DAYS))
    ]


@fetch_boundary('Failed to fetch accountant books.')
def fetch_accountant_books():
    """장부 이름 목록 (선택 박스용)"""
    return list(
        Transaction.objects
        .order_by('accountant_book')
        .values_list('accountant_book', flat=True)
        .distinct()
    )


# ============================================================
# Members / Users
# ============================================================

@fetch_boundary('Failed to fetch all members.')
def fetch_members():
    """선택 위젯용 멤버 목록 (이름순 최대 10명)"""
    return list(Member.objects.order_by('name').values('id', 'name')[:MEMBER_CHOICES_LIMIT])


@fetch_boundary('Failed to fetch member table.')
def fetch_filtered_members(query):
    """
    멤버별 거래 집계 (이름 부분일치)

    LEFT JOIN 이라 거래가 없는 멤버도 0 으로 포함된다.
    """
    rows = (
        Member.objects
        .filter(name__icontains=query)
        .annotate(
            total_transactions=Count('transactions'),
            total_cost=Sum('transactions__amount', filter=Q(transactions__status=STATUS_COST)),
            total_income=Sum('transactions__amount', filter=Q(transactions__status=STATUS_INCOME)),
        )
        .order_by('name')
        .values('id', 'name', 'email', 'image_url', 'total_transactions', 'total_cost', 'total_income')
    )
    return [
        {
            **row,
            'total_cost': format_currency(row['total_cost'] or 0),
            'total_income': format_currency(row['total_income'] or 0),
        }
        for row in rows
    ]


@fetch_boundary('Failed to fetch user.')
def get_user(email):
    """이메일 정확히 일치하는 사용자 (없으면 None)"""
    return User.objects.filter(email=email).first()
