from django.urls import path
from . import views

app_name = 'transactions'

urlpatterns = [
    path('', views.transaction_list, name='transaction_list'),
    path('create/', views.transaction_create, name='transaction_create'),
    path('<uuid:pk>/update/', views.transaction_update, name='transaction_update'),
    path('<uuid:pk>/delete/', views.transaction_delete, name='transaction_delete'),

    # excel
    path('export/', views.transaction_export_view, name='transaction_export'),
]
