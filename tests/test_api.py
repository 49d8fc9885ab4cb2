def start_word_game(client, **body):
    payload = {'categoryId': 1, **body}
    res = client.post('/api/game/start', json=payload)
    assert res.status_code == 200
    return res.get_json()


def test_list_and_get_categories(client):
    res = client.get('/api/categories')
    assert res.status_code == 200
    categories = res.get_json()
    assert len(categories) == 4
    assert categories[0]['gameType'] == 'word'
    assert 'wordCount' in categories[0]

    res = client.get('/api/categories/2')
    assert res.get_json()['name'] == 'Memory Matching'


def test_category_errors(client):
    res = client.get('/api/categories/abc')
    assert res.status_code == 400
    assert res.get_json() == {'message': 'Invalid category ID'}

    res = client.get('/api/categories/999')
    assert res.status_code == 404
    assert res.get_json()['message'] == 'Category not found'


def test_category_words_count(client):
    assert len(client.get('/api/categories/1/words?count=3').get_json()) == 3
    assert len(client.get('/api/categories/1/words?count=0').get_json()) == 10
    assert len(client.get('/api/categories/1/words?count=x').get_json()) == 10
    assert client.get('/api/categories/999/words').status_code == 404


def test_scores_partial_update(client):
    res = client.get('/api/scores')
    assert res.get_json()['bestScore'] == 0

    res = client.post('/api/scores', json={'bestScore': 90, 'categoryProgress': {'1': 2}})
    assert res.status_code == 200
    res = client.patch('/api/scores', json={'crosswordsCompleted': 1})
    score = res.get_json()
    assert score['bestScore'] == 90
    assert score['categoryProgress'] == {'1': 2}
    assert score['crosswordsCompleted'] == 1


def test_invalid_score_body_returns_field_errors(client):
    res = client.post('/api/scores', json={'bestScore': 'lots'})
    assert res.status_code == 400
    body = res.get_json()
    assert body['message'] == 'Invalid score data'
    assert body['errors'][0]['field'] == 'bestScore'


def test_start_word_game(client):
    state = start_word_game(client, wordCount=4)
    assert state['sessionId']
    assert state['gameStatus'] == 'playing'
    assert state['maxWords'] == 4
    assert state['currentCategory'] == 'Word Guessing Challenge'


def test_start_game_validation_and_missing_category(client):
    res = client.post('/api/game/start', json={})
    assert res.status_code == 400
    assert res.get_json()['errors'][0]['field'] == 'categoryId'

    res = client.post('/api/game/start', json={'categoryId': 999})
    assert res.status_code == 404


def test_start_other_games(client):
    res = client.post('/api/memory/start', json={'categoryId': 2, 'difficulty': 2, 'cardCount': 8})
    memory = res.get_json()
    assert res.status_code == 200
    assert len(memory['cards']) == 8
    assert memory['timeLimit'] == 90

    assert client.post('/api/memory/start', json={'categoryId': 2, 'cardCount': 7}).status_code == 400

    number = client.post('/api/number/start', json={'categoryId': 3}).get_json()
    assert number['level']['sequence'] == [2, 4, 6, 8]

    crossword = client.post('/api/crossword/start', json={'categoryId': 4}).get_json()
    assert crossword['timeLimit'] == 600
    assert len(crossword['grid']) == 10


def test_session_actions(client):
    session_id = start_word_game(client)['sessionId']

    res = client.post(f'/api/sessions/{session_id}/actions', json={'action': 'hint'})
    assert res.status_code == 200
    body = res.get_json()
    assert body['accepted'] is True
    assert body['state']['remainingHints'] == 2

    res = client.post(f'/api/sessions/{session_id}/actions', json={'action': 'guess', 'letter': '!'})
    assert res.status_code == 400

    res = client.post(f'/api/sessions/{session_id}/actions', json={'action': 'fly'})
    assert res.status_code == 400

    res = client.get(f'/api/sessions/{session_id}')
    assert res.get_json()['sessionId'] == session_id


def test_delete_session(client):
    session_id = start_word_game(client)['sessionId']
    assert client.delete(f'/api/sessions/{session_id}').status_code == 200
    assert client.get(f'/api/sessions/{session_id}').status_code == 404
    assert client.post(f'/api/sessions/{session_id}/actions', json={'action': 'hint'}).status_code == 404


def test_unknown_route_returns_json(client):
    res = client.get('/api/nothing-here')
    assert res.status_code == 404
    assert res.get_json() == {'message': 'Not found'}


def test_health(client):
    start_word_game(client)
    res = client.get('/api/health')
    body = res.get_json()
    assert res.status_code == 200
    assert body['status'] == 'healthy'
    assert body['activeSessions'] == 1
    assert sorted(body['gameTypes']) == ['crossword', 'memory', 'number', 'word']
