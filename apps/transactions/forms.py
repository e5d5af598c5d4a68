from decimal import Decimal, ROUND_HALF_UP

from django import forms
from django.utils import timezone

from apps.dashboard.data import fetch_members
from .models import Transaction


class TransactionForm(forms.ModelForm):
    """
    거래 입력/수정 폼

    금액은 화면에서 달러 단위(소수 2자리)로 받고, 저장할 때 센트 정수로 바꾼다.
    """
    amount = forms.DecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0'),
        widget=forms.NumberInput(attrs={'step': '0.01', 'placeholder': '0.00'}),
        label='금액',
    )

    class Meta:
        model = Transaction

        fields = [
            'member', 'amount', 'status', 'title', 'description',
            'tx_class', 'sub_class', 'accountant_book', 'date',
        ]
        widgets = {
            'date': forms.DateTimeInput(attrs={'type': 'datetime-local'}, format='%Y-%m-%dT%H:%M'),
            'description': forms.Textarea(attrs={'rows': 3}),
            'status': forms.RadioSelect,
        }
        labels = {
            'member': '멤버',
            'status': '구분',
            'title': '제목',
            'description': '설명',
            'tx_class': '분류',
            'sub_class': '세부 분류',
            'accountant_book': '장부',
            'date': '거래일시',
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        # 선택 목록은 이름순 상위 멤버만 (수정 중인 거래의 멤버는 항상 포함)
        member_choices = [(m['id'], m['name']) for m in fetch_members()]
        editing = not self.instance._state.adding
        current = self.instance.member if editing else None
        if current and current.pk not in {pk for pk, _ in member_choices}:
            member_choices.append((current.pk, current.name))
        self.fields['member'].choices = [('', '---------')] + member_choices

        if editing:
            self.initial['amount'] = Decimal(self.instance.amount) / Decimal(100)
        else:
            self.initial.setdefault('date', timezone.localtime().replace(second=0, microsecond=0))

    def clean_amount(self):
        """달러 → 센트 정수"""
        amount = self.cleaned_data['amount']
        return int((amount * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))
