from datetime import timedelta
from io import BytesIO

import openpyxl
import pytest
from django.urls import reverse
from django.utils import timezone

from apps.transactions.models import Transaction, STATUS_COST, STATUS_INCOME


@pytest.mark.django_db
class TestTransactionList:
    def test_requires_login(self, client):
        """거래 목록은 로그인 필요"""
        response = client.get(reverse('transactions:transaction_list'))
        assert response.status_code == 302

    def test_renders(self, auth_client, cost_tx):
        response = auth_client.get(reverse('transactions:transaction_list'))

        assert response.status_code == 200
        assert response.context['transactions'][0]['id'] == cost_tx.id
        content = response.content.decode()
        assert '$5.00' in content
        assert cost_tx.member.name in content

    def test_mobile_cards_have_title_and_actions(self, auth_client, cost_tx):
        """좁은 화면용 카드에도 제목, 수정 링크, 삭제 폼이 있는지"""
        response = auth_client.get(reverse('transactions:transaction_list'))

        content = response.content.decode()
        cards = content[content.index('class="tx-mobile"'):content.index('<table')]
        assert cost_tx.title in cards
        assert reverse('transactions:transaction_update', args=[cost_tx.id]) in cards
        assert reverse('transactions:transaction_delete', args=[cost_tx.id]) in cards

    def test_pagination_context(self, auth_client, make_transaction):
        now = timezone.now()
        for i in range(50):
            make_transaction(date=now - timedelta(minutes=i))

        response = auth_client.get(reverse('transactions:transaction_list'), {'page': '5'})

        assert len(response.context['transactions']) == 6
        assert response.context['current_page'] == 5
        assert response.context['total_pages'] == 9
        assert response.context['page_numbers'] == [1, '...', 4, 5, 6, '...', 9]
        assert response.context['has_previous']
        assert response.context['has_next']

    def test_invalid_page_is_first_page(self, auth_client, cost_tx):
        response = auth_client.get(reverse('transactions:transaction_list'), {'page': 'abc'})

        assert response.context['current_page'] == 1
        assert not response.context['has_previous']

    def test_search_keeps_query_in_page_links(self, auth_client, make_transaction, other_member):
        for _ in range(7):
            make_transaction(member=other_member)
        make_transaction()

        response = auth_client.get(reverse('transactions:transaction_list'), {'query': 'amy', 'page': '1'})

        assert response.context['query'] == 'amy'
        assert response.context['total_pages'] == 2
        assert response.context['querystring'] == 'query=amy'
        assert all(row['name'] == other_member.name for row in response.context['transactions'])

    def test_empty(self, auth_client):
        response = auth_client.get(reverse('transactions:transaction_list'))

        assert response.context['transactions'] == []
        assert response.context['total_pages'] == 0
        assert '거래가 없습니다.' in response.content.decode()


@pytest.mark.django_db
class TestTransactionCreateUpdateDelete:
    def test_create(self, auth_client, member):
        response = auth_client.post(reverse('transactions:transaction_create'), {
            'member': str(member.id),
            'amount': '25.00',
            'status': STATUS_INCOME,
            'title': '용돈',
            'accountant_book': 'household',
            'date': '2026-10-19T09:00',
        })

        assert response.status_code == 302
        assert response.url == reverse('transactions:transaction_list')
        tx = Transaction.objects.get()
        assert tx.amount == 2500
        assert tx.status == STATUS_INCOME

    def test_create_form_renders(self, auth_client, member):
        response = auth_client.get(reverse('transactions:transaction_create'))

        assert response.status_code == 200
        assert response.context['title'] == '거래 등록'

    def test_create_invalid_rerenders(self, auth_client, member):
        response = auth_client.post(reverse('transactions:transaction_create'), {
            'member': str(member.id),
            'amount': '-3',
            'status': STATUS_COST,
            'accountant_book': 'household',
            'date': '2026-10-19T09:00',
        })

        assert response.status_code == 200
        assert response.context['form'].errors
        assert not Transaction.objects.exists()

    def test_update_form_renders(self, auth_client, cost_tx):
        response = auth_client.get(reverse('transactions:transaction_update', args=[cost_tx.id]))

        assert response.status_code == 200
        assert response.context['transaction'] == cost_tx

    def test_update(self, auth_client, cost_tx, other_member):
        response = auth_client.post(reverse('transactions:transaction_update', args=[cost_tx.id]), {
            'member': str(other_member.id),
            'amount': '7.50',
            'status': STATUS_COST,
            'title': '커피 2잔',
            'accountant_book': 'household',
            'date': '2026-10-19T10:00',
        })

        assert response.status_code == 302
        cost_tx.refresh_from_db()
        assert cost_tx.amount == 750
        assert cost_tx.member == other_member

    def test_update_missing_is_404(self, auth_client):
        url = reverse('transactions:transaction_update', args=['3958dc9e-712f-4377-85e9-fec4b6a6442a'])
        assert auth_client.get(url).status_code == 404

    def test_delete_confirm_then_delete(self, auth_client, cost_tx):
        url = reverse('transactions:transaction_delete', args=[cost_tx.id])

        assert auth_client.get(url).status_code == 200
        assert Transaction.objects.filter(pk=cost_tx.pk).exists()

        response = auth_client.post(url)

        assert response.status_code == 302
        assert not Transaction.objects.filter(pk=cost_tx.pk).exists()

    def test_delete_requires_login(self, client, cost_tx):
        response = client.post(reverse('transactions:transaction_delete', args=[cost_tx.id]))

        assert response.status_code == 302
        assert Transaction.objects.filter(pk=cost_tx.pk).exists()


@pytest.mark.django_db
class TestTransactionExport:
    def test_export_xlsx(self, auth_client, income_tx, cost_tx):
        response = auth_client.get(reverse('transactions:transaction_export'))

        assert response.status_code == 200
        assert response['Content-Type'] == 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
        assert 'attachment; filename="transactions_' in response['Content-Disposition']

        ws = openpyxl.load_workbook(BytesIO(response.content)).active
        rows = list(ws.iter_rows(values_only=True))
        assert rows[0][0] == '거래일시'
        assert len(rows) == 3
        amounts = sorted(row[-1] for row in rows[1:])
        assert amounts == [-5.0, 2500.0]

    def test_export_respects_query(self, auth_client, income_tx, cost_tx):
        response = auth_client.get(reverse('transactions:transaction_export'), {'query': '커피'})

        ws = openpyxl.load_workbook(BytesIO(response.content)).active
        rows = list(ws.iter_rows(values_only=True))
        assert len(rows) == 2
        assert rows[1][7] == '커피'
