from django import forms
from django.contrib.auth.forms import AuthenticationForm


class EmailAuthenticationForm(AuthenticationForm):
    """이메일 + 비밀번호 로그인 폼"""
    username = forms.EmailField(
        label='이메일',
        widget=forms.EmailInput(attrs={'autofocus': True, 'placeholder': 'you@example.com'}),
    )

    error_messages = {
        **AuthenticationForm.error_messages,
        'invalid_login': '이메일 또는 비밀번호가 올바르지 않습니다.',
    }
