from django.contrib import admin
from django.utils.html import format_html

from apps.core.utils import format_currency
from .models import Transaction, STATUS_INCOME


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """
    거래 내역 관리
    """
    list_display = [
        'date',
        'get_status_display_colored',
        'get_amount_display',
        'member',
        'accountant_book',
        'title',
    ]

    date_hierarchy = 'date'

    list_filter = [
        'status',
        'accountant_book',
    ]

    search_fields = ['title', 'description', 'member__name', 'member__email', 'accountant_book']
    list_select_related = ['member']
    autocomplete_fields = ['member']

    @admin.display(description='구분', ordering='status')
    def get_status_display_colored(self, obj):
        if obj.status == STATUS_INCOME:
            return format_html('<span style="color:blue; font-weight:bold;">{}</span>', '수입')
        return format_html('<span style="color:red; font-weight:bold;">{}</span>', '지출')

    @admin.display(description='금액', ordering='amount')
    def get_amount_display(self, obj):
        formatted = format_currency(obj.amount)
        if obj.status == STATUS_INCOME:
            return format_html('<span style="color:blue;">{}</span>', formatted)
        return format_html('<span style="color:red;">{}</span>', formatted)
