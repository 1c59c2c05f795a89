"""
Starting document for a user's first visit with the in-session store.

SessionStore always deep-copies this, so it is never mutated.
"""

SEED_DATA = {
    'last_id': 9,
    'todo_lists': [
        {
            'id': 1,
            'title': 'Work Todos',
            'todos': [
                {'id': 2, 'title': 'Get coffee', 'done': True},
                {'id': 3, 'title': 'Chat with co-workers', 'done': True},
                {'id': 4, 'title': 'Duck out of meeting', 'done': False},
            ],
        },
        {
            'id': 5,
            'title': 'Home Todos',
            'todos': [
                {'id': 6, 'title': 'Feed the cats', 'done': True},
                {'id': 7, 'title': 'Go to bed', 'done': True},
            ],
        },
        {
            'id': 8,
            'title': 'Additional Todos',
            'todos': [],
        },
        {
            'id': 9,
            'title': 'social todos',
            'todos': [],
        },
    ],
}
