import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ReviewCard",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.CharField(max_length=64)),
                ("card_id", models.CharField(max_length=64)),
                ("deck_id", models.CharField(max_length=64)),
                ("easiness_factor", models.FloatField(default=2.5)),
                ("interval", models.PositiveIntegerField(default=0)),
                ("repetition", models.PositiveIntegerField(default=0)),
                ("last_review", models.DateTimeField(blank=True, null=True)),
                ("next_review", models.DateTimeField(blank=True, null=True)),
                ("total_reviews", models.PositiveIntegerField(default=0)),
                ("correct_count", models.PositiveIntegerField(default=0)),
                ("incorrect_count", models.PositiveIntegerField(default=0)),
                ("version", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["user_id", "next_review"], name="review_card_user_next_idx"),
                    models.Index(fields=["user_id", "deck_id", "next_review"], name="review_card_user_deck_next_idx"),
                ],
                "unique_together": {("user_id", "card_id", "deck_id")},
            },
        ),
        migrations.CreateModel(
            name="ReviewLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.CharField(max_length=64)),
                ("card_id", models.CharField(max_length=64)),
                ("deck_id", models.CharField(max_length=64)),
                ("quality", models.SmallIntegerField()),
                ("is_correct", models.BooleanField()),
                ("idempotency_key", models.CharField(blank=True, max_length=64, null=True)),
                ("easiness_factor", models.FloatField()),
                ("interval", models.PositiveIntegerField()),
                ("repetition", models.PositiveIntegerField()),
                ("next_review", models.DateTimeField()),
                ("reviewed_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["user_id", "card_id", "reviewed_at"], name="review_log_user_card_at_idx"),
                ],
                "unique_together": {("user_id", "card_id", "deck_id", "idempotency_key")},
            },
        ),
    ]
