from peewee import AutoField, CharField, DateTimeField, Model, TextField
from infrastructure.peewee.session.db import db

class TaskModel(Model):
    id = AutoField()
    title = CharField(max_length=255)
    description = TextField(null=True)
    status = CharField(max_length=50, index=True)
    created_at = DateTimeField(index=True)
    updated_at = DateTimeField()

    class Meta:
        database = db
        table_name = "tasks"
