import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=100)),
                ('description', models.CharField(max_length=1000)),
                ('category', models.CharField(choices=[('Electronics', 'Electronics'), ('Clothing & Accessories', 'Clothing & Accessories'), ('Home & Garden', 'Home & Garden'), ('Books & Media', 'Books & Media'), ('Sports & Fitness', 'Sports & Fitness'), ('Toys & Games', 'Toys & Games'), ('Automotive', 'Automotive'), ('Health & Beauty', 'Health & Beauty'), ('Jewelry & Watches', 'Jewelry & Watches'), ('Furniture', 'Furniture'), ('Other', 'Other')], max_length=40)),
                ('price', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('images', models.JSONField(blank=True, default=list)),
                ('condition', models.CharField(choices=[('New', 'New'), ('Like New', 'Like New'), ('Good', 'Good'), ('Fair', 'Fair'), ('Poor', 'Poor')], max_length=20)),
                ('is_available', models.BooleanField(default=True)),
                ('location', models.JSONField(blank=True, default=dict)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('views', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('likes', models.ManyToManyField(blank=True, related_name='liked_products', to=settings.AUTH_USER_MODEL)),
                ('seller', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='products', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['category'], name='product_category_idx'),
                    models.Index(fields=['price'], name='product_price_idx'),
                    models.Index(fields=['seller'], name='product_seller_idx'),
                    models.Index(fields=['is_available', '-created_at'], name='product_avail_created_idx'),
                ],
            },
        ),
    ]
