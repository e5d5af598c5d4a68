import pytest
from django.urls import reverse


@pytest.mark.django_db
class TestSecurity:

    # --- 1. 인증 테스트 (Authentication) ---

    @pytest.mark.parametrize('url_name', [
        'dashboard:index',
        'transactions:transaction_list',
        'transactions:transaction_create',
        'transactions:transaction_export',
        'members:member_list',
    ])
    def test_unauthenticated_user_redirected(self, client, url_name):
        """로그인 안 한 사용자는 로그인 페이지로 튕기는지"""
        response = client.get(reverse(url_name))
        assert response.status_code == 302
        assert response.url.startswith(reverse('accounts:login'))

    def test_unauthenticated_user_cannot_delete(self, client, cost_tx):
        """로그인 없이 삭제 요청하면 거래가 남아있는지"""
        response = client.post(reverse('transactions:transaction_delete', args=[cost_tx.id]))

        assert response.status_code == 302
        cost_tx.refresh_from_db()

    # --- 2. 입력 검증 ---

    def test_malformed_id_is_404(self, auth_client):
        """UUID 가 아닌 id 는 URL 단계에서 404"""
        response = auth_client.get('/transactions/1/update/')
        assert response.status_code == 404

    def test_search_query_is_bound_not_executed(self, auth_client, cost_tx):
        """검색어는 파라미터로 바인딩되므로 SQL 로 해석되지 않는다"""
        response = auth_client.get(reverse('transactions:transaction_list'), {'query': "' OR 1=1 --"})

        assert response.status_code == 200
        assert response.context['transactions'] == []

    def test_search_query_is_escaped_in_html(self, auth_client):
        response = auth_client.get(reverse('transactions:transaction_list'), {'query': '<script>x</script>'})

        assert '<script>x</script>' not in response.content.decode()

    # --- 3. 로그아웃 ---

    def test_logout_requires_post(self, auth_client):
        """GET 으로는 로그아웃되지 않는지"""
        response = auth_client.get(reverse('accounts:logout'))
        assert response.status_code == 405
