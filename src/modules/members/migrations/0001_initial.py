import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Member",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(db_index=True, max_length=255)),
                ("city", models.CharField(blank=True, default="", max_length=255)),
                ("street", models.CharField(blank=True, default="", max_length=255)),
                ("zipcode", models.CharField(blank=True, default="", max_length=20)),
            ],
            options={
                "db_table": "members",
                "ordering": ["-created_at"],
            },
        ),
    ]
