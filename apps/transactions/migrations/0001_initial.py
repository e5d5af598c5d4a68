import uuid

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('members', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.BigIntegerField(validators=[django.core.validators.MinValueValidator(0)])),
                ('status', models.CharField(choices=[('income', '수입'), ('cost', '지출')], db_index=True, max_length=10)),
                ('title', models.CharField(blank=True, max_length=200)),
                ('description', models.TextField(blank=True)),
                ('tx_class', models.CharField(blank=True, db_column='class', max_length=100)),
                ('sub_class', models.CharField(blank=True, max_length=100)),
                ('accountant_book', models.CharField(db_index=True, max_length=100)),
                ('date', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('member', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='transactions', to='members.member')),
            ],
            options={
                'db_table': 'transactions',
                'ordering': ['-date'],
                'indexes': [
                    models.Index(fields=['accountant_book', '-date'], name='tx_book_date_idx'),
                    models.Index(fields=['member', '-date'], name='tx_member_date_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('amount__gte', 0)), name='transaction_amount_non_negative'),
                ],
            },
        ),
    ]
