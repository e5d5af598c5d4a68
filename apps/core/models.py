"""
프로젝트 공통 추상 모델

- TimeStampedModel: 생성/수정 시간 자동 추적
- UUIDModel: UUID 기본키 + 타임스탬프 (members, transactions 공용)
"""
import uuid

from django.db import models


class TimeStampedModel(models.Model):
    """생성/수정 시간 자동 추적"""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class UUIDModel(TimeStampedModel):
    """
    UUID 기본키 추상 모델

    URL 에 노출되는 id 가 순번으로 추측되지 않도록 UUID 를 사용한다.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Meta:
        abstract = True
