"""
멤버 (거래가 귀속되는 사람)

멤버 생성/수정/삭제는 관리자 화면과 seed 커맨드에서만 한다.
대시보드 쪽에서는 읽기 전용.
"""
from django.db import models

from apps.core.models import UUIDModel

DEFAULT_AVATAR_URL = '/static/members/default-avatar.png'


class Member(UUIDModel):
    """장부 거래의 귀속 대상"""

    name = models.CharField(max_length=100, db_index=True)
    email = models.EmailField(max_length=254, unique=True)
    image_url = models.CharField(max_length=255, blank=True, default=DEFAULT_AVATAR_URL)

    class Meta:
        db_table = 'members'
        ordering = ['name']

    def __str__(self):
        return self.name
