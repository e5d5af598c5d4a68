import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import Http404, HttpResponse
from django.shortcuts import render, redirect
from django.utils import timezone

from apps.core.utils import generate_pagination, parse_page
from apps.dashboard.data import (
    fetch_filtered_transactions,
    fetch_transaction_by_id,
    fetch_transactions_for_export,
    fetch_transactions_pages,
)
from .forms import TransactionForm
from .utils import export_transactions_to_excel

logger = logging.getLogger(__name__)


def _get_transaction_or_404(pk):
    transaction = fetch_transaction_by_id(pk)
    if transaction is None:
        raise Http404('거래를 찾을 수 없습니다.')
    return transaction


@login_required
def transaction_list(request):
    """거래 목록 (검색 + 6건 단위 페이지네이션)"""
    query = request.GET.get('query', '').strip()
    current_page = parse_page(request.GET.get('page'))

    transactions = fetch_filtered_transactions(query, current_page)
    total_pages = fetch_transactions_pages(query)

    query_params = request.GET.copy()
    query_params.pop('page', None)

    context = {
        'query': query,
        'transactions': transactions,
        'current_page': current_page,
        'total_pages': total_pages,
        'page_numbers': generate_pagination(current_page, total_pages),
        'has_previous': current_page > 1,
        'has_next': current_page < total_pages,
        'querystring': query_params.urlencode(),
    }
    return render(request, 'transactions/transaction_list.html', context)


@login_required
def transaction_create(request):
    """거래 생성"""
    if request.method == 'POST':
        form = TransactionForm(request.POST)
        if form.is_valid():
            transaction = form.save()
            logger.info(f"거래 생성: {transaction.pk} ({transaction.accountant_book}, {transaction.amount})")
            messages.success(request, '거래가 등록되었습니다.')
            return redirect('transactions:transaction_list')
    else:
        form = TransactionForm()

    context = {
        'form': form,
        'title': '거래 등록',
    }
    return render(request, 'transactions/transaction_form.html', context)


@login_required
def transaction_update(request, pk):
    """거래 수정"""
    transaction = _get_transaction_or_404(pk)

    if request.method == 'POST':
        form = TransactionForm(request.POST, instance=transaction)
        if form.is_valid():
            form.save()
            messages.success(request, '거래가 수정되었습니다.')
            return redirect('transactions:transaction_list')
    else:
        form = TransactionForm(instance=transaction)

    context = {
        'form': form,
        'transaction': transaction,
        'title': '거래 수정',
    }
    return render(request, 'transactions/transaction_form.html', context)


@login_required
def transaction_delete(request, pk):
    """거래 삭제 (GET: 확인 화면, POST: 삭제)"""
    transaction = _get_transaction_or_404(pk)

    if request.method == 'POST':
        transaction.delete()
        logger.info(f"거래 삭제: {pk}")
        messages.success(request, '거래가 삭제되었습니다.')
        return redirect('transactions:transaction_list')

    return render(request, 'transactions/transaction_confirm_delete.html', {'transaction': transaction})


@login_required
def transaction_export_view(request):
    """현재 검색 조건의 거래 전체를 엑셀로 내보내기"""
    query = request.GET.get('query', '').strip()
    excel_file = export_transactions_to_excel(fetch_transactions_for_export(query))

    timestamp = timezone.localtime().strftime('%Y%m%d_%H%M%S')
    filename = f"transactions_{timestamp}.xlsx"
    response = HttpResponse(
        excel_file.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="{filename}"'

    return response
