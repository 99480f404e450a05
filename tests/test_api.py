"""Tests for JSON API endpoints."""

from datetime import datetime, timedelta

import pytest

from tracker.extensions import db
from tracker.models import DSAProblem


class TestAnalyticsAPI:
    def test_dashboard(self, client, sample_data):
        resp = client.get('/api/analytics/dashboard')
        assert resp.status_code == 200
        result = resp.get_json()
        assert result['total_problems'] == 3
        assert result['solved_problems'] == 2
        assert result['total_study_hours'] == 2

    def test_dashboard_empty(self, client):
        resp = client.get('/api/analytics/dashboard')
        assert resp.status_code == 200
        result = resp.get_json()
        assert result['total_problems'] == 0
        assert result['dsa_completion_rate'] == 0.0

    def test_dsa(self, client, sample_data):
        result = client.get('/api/analytics/dsa').get_json()
        assert 'problems_by_category' in result
        assert 'problems_by_difficulty' in result
        assert 'problems_by_status' in result
        assert 'category_performance' in result
        assert 'needs_review' in result
        assert result['category_performance'][0]['strength_level'] == 'Average'

    def test_system_design(self, client, sample_data):
        result = client.get('/api/analytics/system-design').get_json()
        assert result['topics_by_status'] == {'Mastered': 1, 'Learning': 1}

    def test_interviews(self, client, sample_data):
        result = client.get('/api/analytics/interviews').get_json()
        assert result['overall_pass_rate'] == 50.0
        assert 'score_trends' in result
        assert 'common_weaknesses' in result

    def test_weak_areas(self, client, sample_data):
        result = client.get('/api/analytics/weak-areas').get_json()
        assert len(result['active_weak_areas']) == 1
        assert result['weak_areas_by_category'] == {'DSA': 1}

    def test_study(self, client, sample_data):
        result = client.get('/api/analytics/study').get_json()
        assert result['total_hours_this_week'] == 2
        assert len(result['daily_study_data']) == 1

    def test_corrupt_enum_is_server_error(self, app, client):
        app.config['PROPAGATE_EXCEPTIONS'] = False
        with app.app_context():
            db.session.add(DSAProblem(title='Broken', difficulty='Impossible'))
            db.session.commit()
        resp = client.get('/api/analytics/dsa')
        assert resp.status_code == 500


class TestDSAAPI:
    def test_create_and_get(self, client):
        resp = client.post('/api/dsa/', json={
            'title': 'Valid Parentheses',
            'category': 'Stack',
            'difficulty': 'Easy',
            'tags': ['stack', 'string'],
            'leetcode_number': 20,
        })
        assert resp.status_code == 201
        created = resp.get_json()
        assert created['status'] == 'NotStarted'
        assert created['tags'] == ['stack', 'string']
        assert created['attempt_count'] == 1

        resp = client.get(f'/api/dsa/{created["id"]}')
        assert resp.status_code == 200
        assert resp.get_json()['title'] == 'Valid Parentheses'

    def test_create_missing_title(self, client):
        resp = client.post('/api/dsa/', json={'difficulty': 'Easy'})
        assert resp.status_code == 400
        assert resp.get_json()['field'] == 'title'

    def test_create_bad_difficulty(self, client):
        resp = client.post('/api/dsa/', json={'title': 'X', 'difficulty': 'Trivial'})
        assert resp.status_code == 400
        body = resp.get_json()
        assert body['field'] == 'difficulty'
        assert 'Easy' in body['error']

    def test_create_bad_body(self, client):
        resp = client.post('/api/dsa/', data='not json', content_type='text/plain')
        assert resp.status_code == 400

    def test_list_filters(self, client, sample_data):
        result = client.get('/api/dsa/?category=Array').get_json()
        assert {p['title'] for p in result} == {'Two Sum', '3Sum'}

        result = client.get('/api/dsa/?status=Solved&difficulty=Easy').get_json()
        assert {p['title'] for p in result} == {'Two Sum', 'Invert Binary Tree'}

    def test_update(self, client, sample_data):
        pid = sample_data['three_sum_id']
        resp = client.put(f'/api/dsa/{pid}', json={'status': 'NeedsReview', 'notes': 'retry'})
        assert resp.status_code == 200
        result = resp.get_json()
        assert result['status'] == 'NeedsReview'
        assert result['notes'] == 'retry'
        assert result['title'] == '3Sum'
        assert result['last_attempted_at'] is not None

    def test_update_not_found(self, client):
        resp = client.put('/api/dsa/999', json={'notes': 'x'})
        assert resp.status_code == 404
        assert 'not found' in resp.get_json()['error']

    def test_delete(self, client, sample_data):
        pid = sample_data['two_sum_id']
        resp = client.delete(f'/api/dsa/{pid}')
        assert resp.status_code == 204
        assert client.get(f'/api/dsa/{pid}').status_code == 404

    def test_record_attempt(self, client, sample_data):
        pid = sample_data['three_sum_id']
        resp = client.post(f'/api/dsa/{pid}/attempt', json={
            'time_taken_minutes': 25, 'solved_optimally': True,
        })
        assert resp.status_code == 200
        result = resp.get_json()
        assert result['attempt_count'] == 2
        assert result['status'] == 'Solved'
        assert result['next_review_date'] is not None

    def test_record_attempt_requires_minutes(self, client, sample_data):
        pid = sample_data['three_sum_id']
        resp = client.post(f'/api/dsa/{pid}/attempt', json={'solved_optimally': True})
        assert resp.status_code == 400
        assert resp.get_json()['field'] == 'time_taken_minutes'

    def test_toggle_favorite(self, client, sample_data):
        pid = sample_data['invert_tree_id']
        assert client.post(f'/api/dsa/{pid}/favorite').get_json()['is_favorite'] is True
        favorites = client.get('/api/dsa/favorites').get_json()
        assert [p['id'] for p in favorites] == [pid]
        # favourites sort first in the main list
        assert client.get('/api/dsa/').get_json()[0]['id'] == pid

    def test_categories(self, client, sample_data):
        assert client.get('/api/dsa/categories').get_json() == ['Array', 'Tree']

    def test_needs_review(self, client, sample_data):
        result = client.get('/api/dsa/needs-review').get_json()
        assert [p['id'] for p in result] == [sample_data['three_sum_id']]

    def test_needs_review_includes_flagged_problems(self, client, sample_data):
        flagged = client.post('/api/dsa/', json={
            'title': 'Flagged', 'category': 'Graph', 'difficulty': 'Hard',
            'status': 'NeedsReview',
        }).get_json()

        result = client.get('/api/dsa/needs-review').get_json()
        assert [p['id'] for p in result] == [sample_data['three_sum_id'], flagged['id']]

        analytics = client.get('/api/analytics/dsa').get_json()
        assert [p['id'] for p in analytics['needs_review']] == [p['id'] for p in result]


class TestSystemDesignAPI:
    def test_create(self, client):
        resp = client.post('/api/system-design/', json={
            'title': 'Rate Limiting', 'category': 'Reliability', 'confidence_level': 2,
        })
        assert resp.status_code == 201
        result = resp.get_json()
        assert result['status'] == 'NotStarted'
        assert result['confidence_level'] == 2

    def test_create_confidence_out_of_range(self, client):
        resp = client.post('/api/system-design/', json={
            'title': 'Rate Limiting', 'confidence_level': 9,
        })
        assert resp.status_code == 400
        assert resp.get_json()['field'] == 'confidence_level'

    def test_review_defaults_to_learning(self, client, sample_data):
        tid = sample_data['caching_id']
        resp = client.post(f'/api/system-design/{tid}/review', json={'confidence_level': 3})
        assert resp.status_code == 200
        result = resp.get_json()
        assert result['status'] == 'Learning'
        assert result['confidence_level'] == 3
        assert result['last_reviewed_at'] is not None

    def test_review_with_status(self, client, sample_data):
        tid = sample_data['sharding_id']
        resp = client.post(f'/api/system-design/{tid}/review', json={
            'confidence_level': 4, 'status': 'Understood',
        })
        assert resp.get_json()['status'] == 'Understood'

    def test_list_and_delete(self, client, sample_data):
        assert len(client.get('/api/system-design/?status=Mastered').get_json()) == 1
        tid = sample_data['sharding_id']
        assert client.delete(f'/api/system-design/{tid}').status_code == 204
        assert len(client.get('/api/system-design/').get_json()) == 1

    def test_get_not_found(self, client):
        assert client.get('/api/system-design/42').status_code == 404


class TestInterviewsAPI:
    def test_create_opens_weak_areas(self, client):
        resp = client.post('/api/interviews/', json={
            'type': 'DSA',
            'company': 'Hooli',
            'interview_date': '2024-05-01T10:00:00Z',
            'overall_score': 4,
            'communication_score': 8,
            'problem_solving_score': 3,
            'technical_score': 7,
        })
        assert resp.status_code == 201
        result = resp.get_json()
        assert result['interview_date'] == '2024-05-01T10:00:00'
        assert [w['area'] for w in result['created_weak_areas']] == ['Problem Solving Approach']
        assert result['created_weak_areas'][0]['severity'] == 'High'

        weak = client.get('/api/weak-areas/?resolved=false').get_json()
        assert len(weak) == 1

    def test_create_score_out_of_range(self, client):
        resp = client.post('/api/interviews/', json={
            'type': 'DSA', 'interview_date': '2024-05-01',
            'overall_score': 11, 'communication_score': 5,
            'problem_solving_score': 5, 'technical_score': 5,
        })
        assert resp.status_code == 400
        assert resp.get_json()['field'] == 'overall_score'

    def test_list_filters(self, client, sample_data):
        result = client.get('/api/interviews/?company=Glo').get_json()
        assert [i['id'] for i in result] == [sample_data['failed_interview_id']]
        result = client.get('/api/interviews/').get_json()
        # newest first
        assert result[0]['id'] == sample_data['failed_interview_id']

    def test_update_and_delete(self, client, sample_data):
        iid = sample_data['passed_interview_id']
        resp = client.put(f'/api/interviews/{iid}', json={'feedback': 'solid'})
        assert resp.get_json()['feedback'] == 'solid'
        assert client.delete(f'/api/interviews/{iid}').status_code == 204
        assert client.get(f'/api/interviews/{iid}').status_code == 404


class TestWeakAreasAPI:
    def test_list_orders_by_severity(self, client, sample_data):
        client.post('/api/weak-areas/', json={'area': 'Tries', 'severity': 'Medium'})
        result = client.get('/api/weak-areas/').get_json()
        assert [w['severity'] for w in result] == ['High', 'Medium', 'Low']

    def test_resolve(self, app, client, sample_data):
        wid = sample_data['graphs_id']
        resp = client.post(f'/api/weak-areas/{wid}/resolve')
        assert resp.status_code == 200
        result = resp.get_json()
        assert result['is_resolved'] is True
        assert result['resolved_at'] is not None

        analytics = client.get('/api/analytics/weak-areas').get_json()
        assert analytics['active_weak_areas'] == []
        assert analytics['resolved_this_month'] == 2

    def test_update_reopen_clears_resolved_at(self, client, sample_data):
        wid = sample_data['estimation_id']
        result = client.put(f'/api/weak-areas/{wid}', json={'is_resolved': False}).get_json()
        assert result['is_resolved'] is False
        assert result['resolved_at'] is None

    def test_create_resolved_sets_timestamp(self, client):
        resp = client.post('/api/weak-areas/', json={'area': 'Heaps', 'is_resolved': True})
        assert resp.status_code == 201
        assert resp.get_json()['resolved_at'] is not None

    def test_bad_severity(self, client):
        resp = client.post('/api/weak-areas/', json={'area': 'Heaps', 'severity': 'Critical'})
        assert resp.status_code == 400


class TestStudySessionsAPI:
    def test_create_defaults_date(self, client):
        resp = client.post('/api/study-sessions/', json={
            'type': 'Behavioral', 'duration_minutes': 45,
        })
        assert resp.status_code == 201
        result = resp.get_json()
        assert result['session_date'] is not None
        assert result['productivity_score'] == 3

    def test_negative_duration_rejected(self, client):
        resp = client.post('/api/study-sessions/', json={
            'type': 'DSA', 'duration_minutes': -5,
        })
        assert resp.status_code == 400

    def test_update_null_date_rejected(self, client, sample_data):
        sid = sample_data['morning_id']
        resp = client.put(f'/api/study-sessions/{sid}', json={'session_date': None})
        assert resp.status_code == 400
        assert resp.get_json()['field'] == 'session_date'
        assert client.get(f'/api/study-sessions/{sid}').get_json()['session_date'] is not None

    def test_update_date(self, client, sample_data):
        sid = sample_data['morning_id']
        resp = client.put(f'/api/study-sessions/{sid}', json={
            'session_date': '2024-05-01T08:30:00',
        })
        assert resp.status_code == 200
        assert resp.get_json()['session_date'] == '2024-05-01T08:30:00'

    def test_list_date_range(self, client, sample_data):
        tomorrow = (datetime.utcnow() + timedelta(days=1)).isoformat()
        assert client.get(f'/api/study-sessions/?from={tomorrow}').get_json() == []
        result = client.get('/api/study-sessions/?type=DSA').get_json()
        assert [s['id'] for s in result] == [sample_data['morning_id']]

    def test_list_bad_date(self, client):
        resp = client.get('/api/study-sessions/?from=yesterday')
        assert resp.status_code == 400


class TestAppWiring:
    def test_index(self, client):
        result = client.get('/').get_json()
        assert result['name'] == 'interview-tracker'

    def test_unknown_route_is_json(self, client):
        resp = client.get('/api/nope')
        assert resp.status_code == 404
        assert resp.get_json() == {'error': 'Not found'}

    def test_cors_allowed_origin(self, client):
        resp = client.get('/api/analytics/dashboard', headers={'Origin': 'http://localhost:4200'})
        assert resp.headers['Access-Control-Allow-Origin'] == 'http://localhost:4200'

    def test_cors_other_origin(self, client):
        resp = client.get('/api/analytics/dashboard', headers={'Origin': 'http://evil.test'})
        assert 'Access-Control-Allow-Origin' not in resp.headers

    def test_cors_preflight(self, client):
        resp = client.options('/api/dsa/', headers={
            'Origin': 'http://localhost:4200',
            'Access-Control-Request-Method': 'POST',
        })
        assert resp.headers['Access-Control-Allow-Origin'] == 'http://localhost:4200'
        assert resp.headers['Access-Control-Max-Age'] == '600'
        assert 'Origin' in resp.headers.get('Vary', '')
