"""
이메일 로그인 백엔드

users 테이블(auth.User)을 이메일로 찾고 비밀번호 해시를 검증한다.
"""
import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend

from apps.dashboard.data import get_user as get_user_by_email

logger = logging.getLogger(__name__)


class EmailBackend(ModelBackend):
    """username 자리에 이메일을 받아 인증"""

    def authenticate(self, request, username=None, password=None, email=None, **kwargs):
        email = email or username
        if not email or password is None:
            return None

        user = get_user_by_email(email.strip())
        if user is None:
            # 존재하지 않는 계정도 해시 계산 시간을 맞춤
            get_user_model()().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user

        logger.info(f"로그인 실패: {email}")
        return None
