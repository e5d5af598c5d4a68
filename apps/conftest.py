"""
앱 공통 테스트 fixture
"""
from datetime import datetime, time

import pytest
from django.contrib.auth.models import User
from django.utils import timezone

from apps.members.models import Member
from apps.transactions.models import Transaction, STATUS_COST, STATUS_INCOME


@pytest.fixture
def test_user(db):
    """테스트용 사용자 (이메일 로그인 가능)"""
    return User.objects.create_user(username='tester', email='tester@example.com', password='pass')


@pytest.fixture
def auth_client(client, test_user):
    """로그인된 클라이언트"""
    client.login(username='tester', password='pass')
    return client


@pytest.fixture
def member(db):
    """테스트용 멤버"""
    return Member.objects.create(
        name='Lee Robinson',
        email='lee@robinson.com',
        image_url='/static/members/lee-robinson.png',
    )


@pytest.fixture
def other_member(db):
    return Member.objects.create(name='Amy Burns', email='amy@burns.com')


def local_dt(day, hour=12):
    """현재 타임존 기준 aware datetime"""
    return timezone.make_aware(datetime.combine(day, time(hour, 0)))


@pytest.fixture
def make_transaction(member):
    """
    거래 생성 헬퍼

    Example:
        make_transaction(amount=500, status='cost', date=local_dt(day))
    """
    def _make(**kwargs):
        defaults = {
            'member': member,
            'amount': 1000,
            'status': STATUS_COST,
            'title': '테스트 거래',
            'accountant_book': 'household',
            'date': timezone.now(),
        }
        defaults.update(kwargs)
        return Transaction.objects.create(**defaults)
    return _make


@pytest.fixture
def income_tx(make_transaction):
    return make_transaction(amount=250000, status=STATUS_INCOME, title='월급', tx_class='salary')


@pytest.fixture
def cost_tx(make_transaction):
    return make_transaction(amount=500, status=STATUS_COST, title='커피', tx_class='food')
