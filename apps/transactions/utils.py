import openpyxl
from io import BytesIO
from decimal import Decimal

from django.utils import timezone
from openpyxl.styles import Font

EXPORT_HEADERS = ['거래일시', '멤버', '이메일', '구분', '장부', '분류', '세부 분류',
                  '제목', '설명', '금액']


def export_transactions_to_excel(transactions):
    """
    거래 내역을 엑셀로 내보내기

    금액은 센트 정수를 달러 Decimal 로 바꿔서 숫자 셀로 기록한다.
    지출은 음수.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "거래내역_내보내기"

    ws.append(EXPORT_HEADERS)
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for tx in transactions:
        # 엑셀은 타임존 있는 datetime 을 못 받으므로 naive 문자열로
        occurred_at = timezone.localtime(tx.date).strftime('%Y-%m-%d %H:%M') if tx.date else ''

        row = [
            occurred_at,
            tx.member.name,
            tx.member.email,
            tx.get_status_display(),
            tx.accountant_book,
            tx.tx_class,
            tx.sub_class,
            tx.title,
            tx.description,
            float(Decimal(tx.signed_amount) / Decimal(100)),
        ]
        ws.append(row)

    ws.column_dimensions['A'].width = 18
    ws.column_dimensions['H'].width = 30

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
