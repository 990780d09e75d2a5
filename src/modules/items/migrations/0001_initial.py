import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Item",
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
                (
                    "kind",
                    models.CharField(
                        choices=[
                            ("BOOK", "Book"),
                            ("ALBUM", "Album"),
                            ("MOVIE", "Movie"),
                        ],
                        default="BOOK",
                        max_length=10,
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("price", models.PositiveIntegerField(default=0)),
                ("stock_quantity", models.PositiveIntegerField(default=0)),
                ("author", models.CharField(blank=True, default="", max_length=255)),
                ("isbn", models.CharField(blank=True, default="", max_length=32)),
                ("artist", models.CharField(blank=True, default="", max_length=255)),
                ("etc", models.CharField(blank=True, default="", max_length=255)),
                ("director", models.CharField(blank=True, default="", max_length=255)),
                ("actor", models.CharField(blank=True, default="", max_length=255)),
            ],
            options={
                "db_table": "items",
                "ordering": ["name"],
                "indexes": [models.Index(fields=["kind"], name="items_kind_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(stock_quantity__gte=0),
                        name="items_stock_non_negative",
                    )
                ],
            },
        ),
    ]
