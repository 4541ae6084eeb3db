import uuid

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Integration",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "provider",
                    models.CharField(
                        choices=[("mailchimp", "Mailchimp"), ("getresponse", "GetResponse")],
                        max_length=20,
                        unique=True,
                        verbose_name="provider",
                    ),
                ),
                ("api_key", models.CharField(max_length=255, verbose_name="API key")),
                ("server_prefix", models.CharField(blank=True, max_length=50, verbose_name="server prefix")),
                ("is_active", models.BooleanField(default=False, verbose_name="active")),
                ("account_info", models.JSONField(blank=True, default=dict, verbose_name="account info")),
                ("last_validated", models.DateTimeField(blank=True, null=True, verbose_name="last validated")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
            ],
            options={
                "verbose_name": "integration",
                "verbose_name_plural": "integrations",
                "ordering": ("provider",),
            },
        ),
    ]
