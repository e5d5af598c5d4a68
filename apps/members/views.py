from django.contrib.auth.decorators import login_required
from django.shortcuts import render

from apps.dashboard.data import fetch_filtered_members


@login_required
def member_list(request):
    """멤버 목록 (이름 검색 + 멤버별 거래 집계)"""
    query = request.GET.get('query', '').strip()
    members = fetch_filtered_members(query)

    return render(request, 'members/member_list.html', {
        'members': members,
        'query': query,
    })
