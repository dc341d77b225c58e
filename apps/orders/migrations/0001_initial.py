from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='OrderModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('customer_id', models.PositiveIntegerField(db_index=True)),
                ('order_number', models.CharField(max_length=50, unique=True)),
                ('status', models.CharField(
                    choices=[
                        ('pending', 'Pending'),
                        ('confirmed', 'Confirmed'),
                        ('in_production', 'In Production'),
                        ('quality_control', 'Quality Control'),
                        ('ready_for_shipping', 'Ready For Shipping'),
                        ('shipped', 'Shipped'),
                        ('shipped_to_customer', 'Shipped To Customer'),
                        ('delivered', 'Delivered'),
                        ('cancelled', 'Cancelled'),
                        ('returned', 'Returned'),
                    ],
                    db_index=True,
                    default='pending',
                    max_length=30,
                )),
                ('priority', models.CharField(
                    choices=[
                        ('low', 'Low'),
                        ('normal', 'Normal'),
                        ('high', 'High'),
                        ('urgent', 'Urgent'),
                        ('critical', 'Critical'),
                    ],
                    db_index=True,
                    default='normal',
                    max_length=20,
                )),
                ('fitter_id', models.PositiveIntegerField(blank=True, db_index=True, null=True)),
                ('factory_id', models.PositiveIntegerField(blank=True, db_index=True, null=True)),
                ('saddle_specifications', models.JSONField(blank=True, default=dict)),
                ('special_instructions', models.TextField(blank=True, null=True)),
                ('estimated_delivery_date', models.DateTimeField(blank=True, db_index=True, null=True)),
                ('actual_delivery_date', models.DateTimeField(blank=True, null=True)),
                ('total_amount', models.DecimalField(decimal_places=2, max_digits=12)),
                ('deposit_paid', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('balance_owing', models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ('measurements', models.JSONField(blank=True, null=True)),
                ('seat_sizes', models.JSONField(blank=True, null=True)),
                ('customer_name', models.CharField(blank=True, db_index=True, max_length=255, null=True)),
                ('saddle_id', models.PositiveIntegerField(blank=True, db_index=True, null=True)),
                ('is_urgent', models.BooleanField(db_index=True, default=False)),
                ('version', models.PositiveIntegerField(default=1)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, null=True)),
            ],
            options={
                'db_table': 'orders',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['fitter_id', 'created_at'], name='orders_fitter_created_idx'),
                    models.Index(fields=['saddle_id', 'created_at'], name='orders_saddle_created_idx'),
                ],
            },
        ),
    ]
