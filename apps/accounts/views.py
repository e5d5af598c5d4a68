from django.contrib.auth.views import (
    LoginView as DjangoLoginView,
    LogoutView as DjangoLogoutView,
)
from django.urls import reverse_lazy

from .forms import EmailAuthenticationForm


class UserLoginView(DjangoLoginView):
    """사용자 로그인 (이메일)"""
    template_name = "accounts/login.html"
    authentication_form = EmailAuthenticationForm
    redirect_authenticated_user = True
    next_page = reverse_lazy("dashboard:index")


class UserLogoutView(DjangoLogoutView):
    """사용자 로그아웃"""
    next_page = reverse_lazy("accounts:login")
