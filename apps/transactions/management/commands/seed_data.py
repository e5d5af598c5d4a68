import random
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model
from django.db import transaction as db_transaction
from django.utils import timezone

from apps.members.models import Member
from apps.transactions.models import Transaction, STATUS_INCOME, STATUS_COST

User = get_user_model()


class Command(BaseCommand):
    help = '장부별 테스트 멤버/거래 데이터 생성'

    # 장부별 설정 (이 부분만 수정하면 새로운 장부 추가 가능)
    BOOK_CONFIG = {
        'household': {
            'income': [('salary', 'monthly'), ('interest', 'savings')],
            'cost': [('food', 'groceries'), ('food', 'dining'), ('housing', 'rent'),
                     ('utilities', 'electricity'), ('transport', 'fuel')],
        },
        'business': {
            'income': [('sales', 'online'), ('sales', 'retail'), ('service', 'consulting')],
            'cost': [('supplies', 'office'), ('payroll', 'staff'), ('marketing', 'ads'),
                     ('software', 'subscription')],
        },
    }

    MEMBERS = [
        ('Delba de Oliveira', 'delba@oliveira.com'),
        ('Lee Robinson', 'lee@robinson.com'),
        ('Hector Simpson', 'hector@simpson.com'),
        ('Steven Tey', 'steven@tey.com'),
        ('Steph Dietz', 'steph@dietz.com'),
        ('Michael Novotny', 'michael@novotny.com'),
        ('Evil Rabbit', 'evil@rabbit.com'),
        ('Emil Kowalski', 'emil@kowalski.com'),
        ('Amy Burns', 'amy@burns.com'),
        ('Balazs Orban', 'balazs@orban.com'),
    ]

    def add_arguments(self, parser):
        parser.add_argument('--book', type=str, default='household', choices=list(self.BOOK_CONFIG), help='장부 선택')
        parser.add_argument('--days', type=int, default=60, help='오늘부터 며칠 전까지 생성할지')
        parser.add_argument('--transactions-per-day', type=int, default=3, help='일별 거래 건수')
        parser.add_argument('--email', type=str, default='user@example.com', help='로그인용 사용자 이메일')
        parser.add_argument('--password', type=str, default='123456', help='로그인용 비밀번호')
        parser.add_argument('--seed', type=int, default=None, help='random seed (재현용)')

    @db_transaction.atomic
    def handle(self, *args, **options):
        book = options['book']
        days = options['days']
        per_day = options['transactions_per_day']
        config = self.BOOK_CONFIG[book]

        if options['seed'] is not None:
            random.seed(options['seed'])

        self.stdout.write(f"=== [{book}] 장부 데이터 생성 시작 ===")

        # 1. 로그인 사용자
        user, created = User.objects.get_or_create(
            username=options['email'],
            defaults={'email': options['email']},
        )
        if created:
            user.set_password(options['password'])
            user.save()

        # 2. 멤버
        members = []
        for name, email in self.MEMBERS:
            slug = email.split('@')[0]
            member, _ = Member.objects.get_or_create(
                email=email,
                defaults={'name': name, 'image_url': f'/static/members/{slug}.png'},
            )
            members.append(member)

        # 3. 거래
        now = timezone.now()
        new_transactions = []
        for day_offset in range(days):
            day = now - timedelta(days=day_offset)
            for _ in range(per_day):
                status = STATUS_INCOME if random.random() < 0.3 else STATUS_COST
                tx_class, sub_class = random.choice(config[status])
                amount = random.randint(500, 250000) if status == STATUS_INCOME else random.randint(100, 30000)
                new_transactions.append(Transaction(
                    member=random.choice(members),
                    amount=amount,
                    status=status,
                    title=f"{tx_class} / {sub_class}",
                    description='',
                    tx_class=tx_class,
                    sub_class=sub_class,
                    accountant_book=book,
                    date=day.replace(hour=random.randint(8, 21), minute=random.randint(0, 59)),
                ))

        Transaction.objects.bulk_create(new_transactions)

        self.stdout.write(
            self.style.SUCCESS(
                f'✅ 멤버 {len(members)}명, 거래 {len(new_transactions)}건 생성 (로그인: {user.email})'
            )
        )
