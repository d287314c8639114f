from festboard.services.leaderboard import SharedState, default_document


def test_get_returns_initial_document():
    state = SharedState(default_document())
    assert state.get() == default_document()


def test_get_hands_out_copies():
    state = SharedState(default_document())
    snapshot = state.get()
    snapshot['overall'].append({'name': 'X', 'points': 1})
    assert len(state.get()['overall']) == 2


def test_replace_is_a_full_overwrite():
    state = SharedState(default_document())
    state.replace({'categories': {}})
    assert state.get() == {'categories': {}}


def test_replace_does_not_alias_the_caller_document():
    state = SharedState(default_document())
    doc = {'overall': [], 'categories': {}}
    state.replace(doc)
    doc['overall'].append({'name': 'late', 'points': 3})
    assert state.get()['overall'] == []


def test_stamp_only_applies_to_the_current_revision():
    state = SharedState(default_document())
    first = state.replace({'categories': {}, 'round': 1})
    second = state.replace({'categories': {}, 'round': 2})
    assert first < second
    assert state.stamp(first, '2026-01-01T00:00:00+00:00') is False
    assert 'lastUpdated' not in state.get()
    assert state.stamp(second, '2026-01-01T00:00:00+00:00') is True
    assert state.get()['lastUpdated'] == '2026-01-01T00:00:00+00:00'
