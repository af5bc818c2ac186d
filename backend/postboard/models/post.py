# postboard/models/post.py
from tortoise import fields, models


class Post(models.Model):
    id = fields.IntField(primary_key=True)
    title = fields.CharField(max_length=255)
    content = fields.TextField()
    # Owner reference; the database drops an account's posts when the account goes away
    author = fields.ForeignKeyField(
        "models.Account",
        related_name="posts",
        on_delete=fields.CASCADE,
        source_field="user_id",
    )
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "posts"
