from sqlalchemy import false

from todos import db


class TodoList(db.Model):
    __tablename__ = 'todolists'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text, nullable=False)
    username = db.Column(db.Text, nullable=False)

    # A user's list titles must be unique; PgStore relies on this constraint
    __table_args__ = (
        db.UniqueConstraint('title', 'username', name='todolists_title_username_key'),
    )

    def __repr__(self):
        return f'<TodoList {self.id}: {self.title}>'


class Todo(db.Model):
    __tablename__ = 'todos'

    id = db.Column(db.Integer, primary_key=True)
    todolist_id = db.Column(
        db.Integer,
        db.ForeignKey('todolists.id', ondelete='CASCADE'),
        nullable=False,
    )
    title = db.Column(db.Text, nullable=False)
    done = db.Column(db.Boolean, nullable=False, default=False, server_default=false())
    username = db.Column(db.Text, nullable=False)

    __table_args__ = (
        db.Index('ix_todos_todolist_username', 'todolist_id', 'username'),
    )

    def __repr__(self):
        return f'<Todo {self.id}: {self.title}>'
