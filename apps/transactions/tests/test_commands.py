from io import StringIO

import pytest
from django.contrib.auth.models import User
from django.core.management import call_command

from apps.members.models import Member
from apps.transactions.models import Transaction


@pytest.mark.django_db
class TestSeedDataCommand:
    def test_creates_user_members_and_transactions(self):
        out = StringIO()
        call_command('seed_data', days=2, transactions_per_day=3, seed=1, stdout=out)

        assert Member.objects.count() == 10
        assert Transaction.objects.count() == 6
        assert set(Transaction.objects.values_list('accountant_book', flat=True)) == {'household'}
        user = User.objects.get(email='user@example.com')
        assert user.check_password('123456')
        assert '거래 6건 생성' in out.getvalue()

    def test_rerun_reuses_members(self):
        call_command('seed_data', days=1, transactions_per_day=1, stdout=StringIO())
        call_command('seed_data', book='business', days=1, transactions_per_day=2, stdout=StringIO())

        assert Member.objects.count() == 10
        assert Transaction.objects.in_book('business').count() == 2
        assert User.objects.count() == 1
