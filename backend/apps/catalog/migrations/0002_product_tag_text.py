from django.db import migrations, models


def fill_tag_text(apps, schema_editor):
    Product = apps.get_model("catalog", "Product")
    for product in Product.objects.only("id", "tags").iterator():
        Product.objects.filter(pk=product.pk).update(
            tag_text="\n".join(str(t) for t in product.tags or [])
        )


class Migration(migrations.Migration):

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='product',
            name='tag_text',
            field=models.TextField(blank=True, default='', editable=False),
        ),
        migrations.RunPython(fill_tag_text, migrations.RunPython.noop),
    ]
