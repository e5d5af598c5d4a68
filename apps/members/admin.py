from django.contrib import admin
from django.db.models import Count

from .models import Member


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    list_display = ['name', 'email', 'get_transaction_count', 'created_at']
    search_fields = ['name', 'email']

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.annotate(tx_count=Count('transactions'))

    @admin.display(description='거래 횟수', ordering='tx_count')
    def get_transaction_count(self, obj):
        return f"{obj.tx_count}건"
