from flask import Blueprint, render_template, redirect, url_for, flash, abort
from flask_login import login_required
import logging

from todos.lists.forms import TodoListForm, TodoForm
from todos.store import DuplicateKeyError, get_store

logger = logging.getLogger(__name__)

lists_bp = Blueprint('lists', __name__,
                     template_folder='templates')

DUPLICATE_TITLE_MESSAGE = 'The list title must be unique.'


# --- Helper Functions ---

def load_todo_list_or_404(todo_list_id):
    """Load a todo list owned by the current user, or 404."""
    todo_list = get_store().load_todo_list(todo_list_id)
    if todo_list is None:
        abort(404)
    return todo_list


def flash_form_errors(form):
    for errors in form.errors.values():
        for error in errors:
            flash(error, 'error')


def render_todo_list(todo_list, form=None):
    """Render one list with its todos in display order."""
    store = get_store()
    todo_list['todos'] = store.sorted_todos(todo_list)
    return render_template('lists/list.html',
                           todo_list=todo_list,
                           form=form or TodoForm(formdata=None),
                           is_done_todo_list=store.is_done_todo_list(todo_list),
                           has_undone_todos=store.has_undone_todos(todo_list))


def todo_counts(store, todo_list):
    return {
        'count_all': len(todo_list['todos']),
        'count_done': sum(1 for todo in todo_list['todos'] if todo['done']),
        'is_done': store.is_done_todo_list(todo_list),
    }


# --- Todo lists ---

@lists_bp.route('/lists')
@login_required
def index():
    """All of the user's todo lists"""
    store = get_store()
    todo_lists = store.sorted_todo_lists()
    todos_info = [todo_counts(store, todo_list) for todo_list in todo_lists]
    return render_template('lists/lists.html',
                           todo_lists=todo_lists,
                           todos_info=todos_info)


@lists_bp.route('/lists/new')
@login_required
def new():
    """Show the form for a new todo list"""
    return render_template('lists/new_list.html', form=TodoListForm())


@lists_bp.route('/lists', methods=['POST'])
@login_required
def create():
    """Create a new todo list"""
    form = TodoListForm()
    store = get_store()

    if not form.validate_on_submit():
        flash_form_errors(form)
        return render_template('lists/new_list.html', form=form)

    title = form.todo_list_title.data
    if store.exists_todo_list_title(title) or not store.create_todo_list(title):
        flash(DUPLICATE_TITLE_MESSAGE, 'error')
        return render_template('lists/new_list.html', form=form)

    flash('The todo list has been created.', 'success')
    return redirect(url_for('lists.index'))


@lists_bp.route('/lists/<int:todo_list_id>')
@login_required
def show(todo_list_id):
    """One todo list and its todos"""
    todo_list = load_todo_list_or_404(todo_list_id)
    return render_todo_list(todo_list)


@lists_bp.route('/lists/<int:todo_list_id>/edit')
@login_required
def edit(todo_list_id):
    """Show the form for renaming or deleting a todo list"""
    todo_list = load_todo_list_or_404(todo_list_id)
    form = TodoListForm(todo_list_title=todo_list['title'])
    return render_template('lists/edit_list.html', todo_list=todo_list, form=form)


@lists_bp.route('/lists/<int:todo_list_id>/edit', methods=['POST'])
@login_required
def update(todo_list_id):
    """Rename a todo list"""
    store = get_store()
    todo_list = load_todo_list_or_404(todo_list_id)
    form = TodoListForm()

    def rerender_edit_list():
        return render_template('lists/edit_list.html', todo_list=todo_list, form=form)

    if not form.validate_on_submit():
        flash_form_errors(form)
        return rerender_edit_list()

    title = form.todo_list_title.data
    if title != todo_list['title'] and store.exists_todo_list_title(title):
        flash(DUPLICATE_TITLE_MESSAGE, 'error')
        return rerender_edit_list()

    try:
        updated = store.set_todo_list_title(todo_list_id, title)
    except DuplicateKeyError:
        flash(DUPLICATE_TITLE_MESSAGE, 'error')
        return rerender_edit_list()
    if not updated:
        abort(404)

    flash('Todo list updated.', 'success')
    return redirect(url_for('lists.show', todo_list_id=todo_list_id))


@lists_bp.route('/lists/<int:todo_list_id>/destroy', methods=['POST'])
@login_required
def destroy(todo_list_id):
    """Delete a todo list and its todos"""
    if not get_store().delete_todo_list(todo_list_id):
        abort(404)
    flash('Todo list deleted.', 'success')
    return redirect(url_for('lists.index'))


@lists_bp.route('/lists/<int:todo_list_id>/complete_all', methods=['POST'])
@login_required
def complete_all(todo_list_id):
    """Mark every todo in a list as done"""
    if not get_store().complete_all_todos(todo_list_id):
        abort(404)
    flash('All todos have been marked as done.', 'success')
    return redirect(url_for('lists.show', todo_list_id=todo_list_id))


# --- Todos ---

@lists_bp.route('/lists/<int:todo_list_id>/todos', methods=['POST'])
@login_required
def create_todo(todo_list_id):
    """Add a todo to a list"""
    todo_list = load_todo_list_or_404(todo_list_id)
    form = TodoForm()

    if not form.validate_on_submit():
        flash_form_errors(form)
        return render_todo_list(todo_list, form=form)

    if not get_store().create_todo(todo_list_id, form.todo_title.data):
        abort(404)

    flash('The todo has been created.', 'success')
    return redirect(url_for('lists.show', todo_list_id=todo_list_id))


@lists_bp.route('/lists/<int:todo_list_id>/todos/<int:todo_id>/toggle', methods=['POST'])
@login_required
def toggle_todo(todo_list_id, todo_id):
    """Toggle a todo between done and not done"""
    store = get_store()
    if not store.toggle_done_todo(todo_list_id, todo_id):
        abort(404)

    todo = store.load_todo(todo_list_id, todo_id)
    if todo is None:
        abort(404)

    if todo['done']:
        flash(f'"{todo["title"]}" marked done.', 'success')
    else:
        flash(f'"{todo["title"]}" marked as NOT done!', 'success')
    return redirect(url_for('lists.show', todo_list_id=todo_list_id))


@lists_bp.route('/lists/<int:todo_list_id>/todos/<int:todo_id>/destroy', methods=['POST'])
@login_required
def destroy_todo(todo_list_id, todo_id):
    """Delete a todo"""
    if not get_store().delete_todo(todo_list_id, todo_id):
        abort(404)
    flash('The todo has been deleted.', 'success')
    return redirect(url_for('lists.show', todo_list_id=todo_list_id))
