"""
HTTP API tests (FastAPI TestClient)
"""
import inspect

from fastapi.routing import APIRoute

from wai_game.main import app


TARGET = "더 나은 세상을 만드는 연결"


def _create_team(client, name="Alpha", password="pw"):
    res = client.post('/api/teams', json={
        'action': 'create', 'name': name, 'members': ['Kim', 'Lee'], 'password': password,
    })
    assert res.status_code == 200
    return res.json()


def _create_question(client, target=TARGET, order=0):
    res = client.post('/api/questions', json={'action': 'create', 'targetAnswer': target, 'order': order})
    assert res.status_code == 200
    return res.json()


def _set_status(client, status):
    res = client.post('/api/game', json={'action': 'setStatus', 'status': status})
    assert res.status_code == 200
    return res.json()


def test_health(client):
    res = client.get('/')
    assert res.status_code == 200
    data = res.json()
    assert data['status'] == 'ok'
    assert data['game_status'] == 'Preparing'


def test_game_state_and_status(client):
    state = client.get('/api/game').json()
    assert state['status'] == 'Preparing'
    assert state['teams'] == [] and state['questions'] == [] and state['reactions'] == []

    assert _set_status(client, 'Running') == {'success': True, 'status': 'Running'}
    state = client.get('/api/game').json()
    assert state['status'] == 'Running'
    assert state['startedAt'] is not None


def test_set_status_accepts_korean_label(client):
    assert _set_status(client, '종료')['status'] == 'Ended'


def test_set_status_rejects_unknown(client):
    res = client.post('/api/game', json={'action': 'setStatus', 'status': 'Paused'})
    assert res.status_code == 400


def test_unknown_action(client):
    for path in ('/api/game', '/api/teams', '/api/questions'):
        res = client.post(path, json={'action': 'explode'})
        assert res.status_code == 400
        assert res.json()['detail'] == 'Invalid action'


def test_reset(client, store):
    team = _create_team(client)
    q = _create_question(client)
    _set_status(client, 'Running')
    client.post('/api/answers', json={
        'teamId': team['id'], 'questionId': q['id'], 'userQuestion': 'p', 'answer': TARGET,
    })

    res = client.post('/api/game', json={'action': 'reset'})

    assert res.status_code == 200
    teams = client.get('/api/teams').json()
    assert teams[0]['answers'] == []
    assert teams[0]['totalScore'] == 0
    assert client.get('/api/game').json()['status'] == 'Preparing'


# ==================== TEAMS ====================

def test_create_team(client):
    team = _create_team(client)

    assert team['id'].startswith('team-')
    assert team['name'] == 'Alpha'
    assert team['members'] == ['Kim', 'Lee']
    assert team['totalScore'] == 0
    assert team['currentQuestionIndex'] == 0
    assert 'createdAt' in team

    assert client.get(f"/api/teams/{team['id']}").json()['id'] == team['id']
    assert len(client.get('/api/teams').json()) == 1


def test_create_team_invalid(client):
    res = client.post('/api/teams', json={'action': 'create', 'name': 'Alpha', 'members': [], 'password': 'pw'})
    assert res.status_code == 400
    res = client.post('/api/teams', json={'action': 'create', 'name': 'Alpha', 'members': ['Kim'], 'password': ''})
    assert res.status_code == 400


def test_get_unknown_team(client):
    assert client.get('/api/teams/team-missing').status_code == 404


def test_authenticate(client):
    team = _create_team(client, password='secret')

    res = client.post('/api/teams', json={'action': 'authenticate', 'teamId': team['id'], 'password': 'secret'})
    assert res.status_code == 200
    assert res.json()['success'] is True
    assert res.json()['team']['id'] == team['id']

    res = client.post('/api/teams', json={'action': 'authenticate', 'teamId': team['id'], 'password': 'nope'})
    assert res.status_code == 401
    assert res.json() == {'success': False}


def test_update_and_delete_team(client):
    team = _create_team(client)

    res = client.post('/api/teams', json={'action': 'update', 'teamId': team['id'], 'name': 'Beta'})
    assert res.status_code == 200
    assert res.json()['team']['name'] == 'Beta'

    res = client.post('/api/teams', json={'action': 'update', 'teamId': 'team-missing', 'name': 'X'})
    assert res.status_code == 404

    res = client.post('/api/teams', json={'action': 'delete', 'teamId': team['id']})
    assert res.json() == {'success': True}
    assert client.get('/api/teams').json() == []


# ==================== QUESTIONS ====================

def test_question_crud(client):
    second = _create_question(client, 'second', 1)
    first = _create_question(client, 'first', 0)

    listed = client.get('/api/questions').json()
    assert [q['id'] for q in listed] == [first['id'], second['id']]
    assert listed[0]['targetAnswer'] == 'first'

    res = client.post('/api/questions', json={'action': 'update', 'questionId': second['id'], 'targetAnswer': 'changed'})
    assert res.status_code == 200
    assert res.json()['question']['targetAnswer'] == 'changed'

    res = client.post('/api/questions', json={'action': 'update', 'questionId': 'q-missing', 'order': 2})
    assert res.status_code == 404

    client.post('/api/questions', json={'action': 'delete', 'questionId': first['id']})
    assert [q['id'] for q in client.get('/api/questions').json()] == [second['id']]


def test_create_question_requires_target(client):
    res = client.post('/api/questions', json={'action': 'create', 'targetAnswer': '  '})
    assert res.status_code == 400


def test_set_all_questions(client):
    for i in range(5):
        _create_question(client, f'old {i}', i)

    res = client.post('/api/questions', json={
        'action': 'setAll',
        'questions': [{'targetAnswer': 'new a'}, {'targetAnswer': 'new b'}],
    })

    assert res.status_code == 200
    listed = client.get('/api/questions').json()
    assert len(listed) == 2
    assert [q['order'] for q in listed] == [0, 1]


def test_set_all_rejects_bad_payload(client):
    res = client.post('/api/questions', json={'action': 'setAll', 'questions': 'nope'})
    assert res.status_code == 400


# ==================== ANSWERS ====================

def test_submit_while_preparing_is_rejected(client, store):
    team = _create_team(client)
    q = _create_question(client)

    res = client.post('/api/answers', json={
        'teamId': team['id'], 'questionId': q['id'], 'userQuestion': 'p', 'answer': TARGET,
    })

    assert res.status_code == 400
    assert store.get_team(team['id']).answers == []


def test_submit_unknown_question(client):
    team = _create_team(client)
    _set_status(client, 'Running')

    res = client.post('/api/answers', json={
        'teamId': team['id'], 'questionId': 'q-missing', 'userQuestion': 'p', 'answer': 'a',
    })
    assert res.status_code == 404


def test_submit_and_fetch_answer(client):
    team = _create_team(client)
    q = _create_question(client)
    _set_status(client, 'Running')

    res = client.post('/api/answers', json={
        'teamId': team['id'], 'questionId': q['id'],
        'userQuestion': '우리 회사의 비전은?', 'answer': f'  {TARGET}  ',
    })

    assert res.status_code == 200
    assert res.json() == {
        'success': True, 'score': 10.0, 'questionId': q['id'], 'feedback': '완벽합니다! 🎉',
    }

    res = client.get('/api/answers', params={'teamId': team['id'], 'questionId': q['id']})
    answer = res.json()
    assert answer['userQuestion'] == '우리 회사의 비전은?'
    assert answer['score'] == 10.0
    assert 'submittedAt' in answer

    res = client.get('/api/answers', params={'teamId': team['id'], 'questionId': 'q-other'})
    assert res.status_code == 200
    assert res.json() is None


def test_get_answer_requires_params(client):
    assert client.get('/api/answers', params={'teamId': 'team-1'}).status_code == 400


def test_submit_invalid_json(client):
    res = client.post('/api/answers', content=b'{oops', headers={'Content-Type': 'application/json'})
    assert res.status_code == 400


# ==================== REACTIONS ====================

def test_reactions(client):
    team = _create_team(client)
    q = _create_question(client)

    counts = client.get('/api/reactions', params={'questionId': q['id']}).json()
    assert counts == {'like': 0, 'clap': 0, 'fire': 0, 'heart': 0, 'laugh': 0}

    res = client.post('/api/reactions', json={
        'questionId': q['id'], 'teamId': team['id'], 'type': 'fire', 'userId': 'viewer-1',
    })
    assert res.status_code == 200
    assert res.json()['type'] == 'fire'
    client.post('/api/reactions', json={
        'questionId': q['id'], 'teamId': team['id'], 'type': '박수', 'userId': 'viewer-1',
    })

    counts = client.get('/api/reactions', params={'questionId': q['id']}).json()
    assert counts == {'like': 0, 'clap': 1, 'fire': 1, 'heart': 0, 'laugh': 0}
    assert len(client.get('/api/reactions').json()) == 2


def test_reaction_validation(client):
    res = client.post('/api/reactions', json={'questionId': 'q-1', 'teamId': 'team-1', 'type': 'fire'})
    assert res.status_code == 400
    res = client.post('/api/reactions', json={
        'questionId': 'q-1', 'teamId': 'team-1', 'type': 'boo', 'userId': 'viewer-1',
    })
    assert res.status_code == 400


# ==================== LEADERBOARD ====================

def test_poll(client):
    alpha = _create_team(client, 'Alpha')
    beta = _create_team(client, 'Beta')
    q = _create_question(client)
    _set_status(client, 'Running')
    client.post('/api/answers', json={
        'teamId': beta['id'], 'questionId': q['id'], 'userQuestion': 'p', 'answer': TARGET,
    })

    data = client.get('/api/poll').json()

    assert data['status'] == 'Running'
    assert data['totalQuestions'] == 1
    assert 'timestamp' in data
    assert [r['team']['id'] for r in data['rankings']] == [beta['id'], alpha['id']]
    assert [r['rank'] for r in data['rankings']] == [1, 2]
    assert data['rankings'][0]['progress'] == 100.0
    assert data['rankings'][1]['progress'] == 0.0


def test_overview_and_scoreboard(client):
    team = _create_team(client)
    q = _create_question(client)
    _set_status(client, 'Running')
    client.post('/api/answers', json={
        'teamId': team['id'], 'questionId': q['id'], 'userQuestion': 'p', 'answer': TARGET,
    })

    overview = client.get('/api/overview').json()
    assert overview['totalTeams'] == 1
    assert overview['totalAnswers'] == 1
    assert overview['averageScore'] == 10.0

    board = client.get('/api/scoreboard').json()
    assert board[0]['targetAnswer'] == TARGET
    assert board[0]['reactions']['like'] == 0
    assert board[0]['teamAnswers'][0]['teamName'] == 'Alpha'


def test_rankings_endpoint(client):
    _create_team(client)
    rankings = client.get('/api/rankings').json()
    assert rankings[0]['rank'] == 1
    assert rankings[0]['progress'] == 0


def test_config(client):
    data = client.get('/config').json()
    assert data['scoring']['max_score'] == 10.0
    assert data['reaction_types']['fire'] == '불'
    assert data['statuses']['Running'] == '진행중'
    assert len(data['scoring']['feedback_bands']) == 6


def test_store_routes_run_in_threadpool():
    """Every route but the answer POST is sync so saves stay off the event loop"""
    async_routes = [
        (route.path, sorted(route.methods))
        for route in app.routes
        if isinstance(route, APIRoute) and inspect.iscoroutinefunction(route.endpoint)
    ]
    assert async_routes == [('/api/answers', ['POST'])]
