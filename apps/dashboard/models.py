"""
Dashboard 앱은 자체 모델을 가지지 않습니다.
기존 모델(Member, Transaction, User)의 데이터를 집계합니다.

주요 기능:
- 요약 카드 (멤버 수 / 거래 수 / 수입·지출 합계)
- 최근 거래 5건
- 최근 14일 일별 지출

모든 조회는 data.py 의 함수를 통해서만 합니다.
"""
