from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.core.models import UUIDModel
from apps.members.models import Member

STATUS_INCOME = 'income'
STATUS_COST = 'cost'


class TransactionQuerySet(models.QuerySet):
    """Transaction 전용 QuerySet (헬퍼 메서드)"""
    def income(self): return self.filter(status=STATUS_INCOME)
    def cost(self): return self.filter(status=STATUS_COST)
    def in_book(self, accountant_book): return self.filter(accountant_book=accountant_book)
    def with_member(self): return self.select_related('member')

    def by_date_range(self, start_date, end_date):
        """시작/종료일 모두 포함 (달력 날짜 기준)"""
        return self.filter(date__date__gte=start_date, date__date__lte=end_date)


class Transaction(UUIDModel):
    """거래 내역 (핵심 모델)"""
    STATUS_CHOICES = [(STATUS_INCOME, '수입'), (STATUS_COST, '지출')]

    member = models.ForeignKey(Member, on_delete=models.PROTECT, related_name='transactions')

    # 금액은 최소 단위(센트) 정수. 부호는 status 로 결정되므로 항상 0 이상
    amount = models.BigIntegerField(validators=[MinValueValidator(0)])
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, db_index=True)
    title = models.CharField(max_length=200, blank=True)
    description = models.TextField(blank=True)
    tx_class = models.CharField(max_length=100, blank=True, db_column='class')
    sub_class = models.CharField(max_length=100, blank=True)
    accountant_book = models.CharField(max_length=100, db_index=True)
    date = models.DateTimeField(default=timezone.now, db_index=True)

    objects = TransactionQuerySet.as_manager()

    class Meta:
        db_table = 'transactions'
        ordering = ['-date']
        indexes = [
            models.Index(fields=['accountant_book', '-date'], name='tx_book_date_idx'),
            models.Index(fields=['member', '-date'], name='tx_member_date_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gte=0), name='transaction_amount_non_negative'),
        ]

    def __str__(self):
        return f"{self.get_status_display()} {self.amount} ({self.accountant_book}, {self.date:%Y-%m-%d})"

    @property
    def signed_amount(self):
        """지출은 음수로 본 금액"""
        return -self.amount if self.status == STATUS_COST else self.amount
