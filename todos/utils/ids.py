def _largest_id(document):
    largest = 0
    for todo_list in document.get('todo_lists', []):
        largest = max(largest, todo_list['id'])
        for todo in todo_list['todos']:
            largest = max(largest, todo['id'])
    return largest


def next_id(document):
    """
    Hand out the next id for a list or todo in an in-session document.

    The counter lives in the document itself (document['last_id']) so ids keep
    increasing for as long as the session does. A document without a counter
    resumes after the largest id it already contains.
    """
    if 'last_id' not in document:
        document['last_id'] = _largest_id(document)
    document['last_id'] += 1
    return document['last_id']
