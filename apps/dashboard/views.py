from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.shortcuts import render

from apps.core.utils import generate_y_axis, parse_iso_date
from .data import (
    fetch_accountant_books,
    fetch_card_data,
    fetch_last_14_days_costs,
    fetch_latest_transactions,
)


@login_required
def index(request):
    """
    대시보드 홈

    - ?book=   장부 (기본값: DEFAULT_ACCOUNTANT_BOOK)
    - ?start= / ?end=   ISO 날짜, 둘 다 있을 때만 카드 집계를 기간으로 제한
    """
    book = request.GET.get('book') or settings.DEFAULT_ACCOUNTANT_BOOK
    start_date = parse_iso_date(request.GET.get('start'))
    end_date = parse_iso_date(request.GET.get('end'))

    if start_date and end_date and start_date > end_date:
        # 순서가 뒤바뀐 입력은 교환해서 처리
        start_date, end_date = end_date, start_date

    card_data = fetch_card_data(book, start_date=start_date, end_date=end_date)
    latest_transactions = fetch_latest_transactions()
    daily_costs = fetch_last_14_days_costs(book)
    y_axis_labels, y_axis_top = generate_y_axis(row['total_cost'] for row in daily_costs)

    # 선택 목록에 현재 장부 항상 포함
    books = fetch_accountant_books()
    if book not in books:
        books = sorted([*books, book])

    context = {
        'book': book,
        'books': books,
        'start_date': start_date,
        'end_date': end_date,
        'card_data': card_data,
        'latest_transactions': latest_transactions,
        'daily_costs': daily_costs,
        'y_axis_labels': y_axis_labels,
        'y_axis_top': y_axis_top,
    }
    return render(request, 'dashboard/index.html', context)
