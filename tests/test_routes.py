"""
Integration tests for API routes
"""
import unittest
from unittest.mock import patch
from whatsnew import app


CATALOG = [
    {'version': '1.0.0', 'title': 'Initial Release', 'changes': [
        {'title': 'App Launch', 'description': 'The first release of your app.'},
    ]},
    {'version': '1.1.0', 'title': 'Enhancements', 'changes': [
        {'title': 'Visual Improvements', 'description': 'Refined animations and icons.'},
        {'title': 'Bug Fixes', 'description': 'Resolved issues for stability.'},
    ]},
    {'version': '1.1.1', 'title': 'Patch', 'changes': []},
]


class TestRoutes(unittest.TestCase):
    """Test API routes"""

    def setUp(self):
        """Set up test client"""
        self.app = app
        self.app.config['TESTING'] = True
        self.client = self.app.test_client()

    def test_health_route(self):
        response = self.client.get('/api/health')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['status'], 'ok')

    def test_whats_new_first_run_returns_all(self):
        response = self.client.post('/api/whats-new', json={'catalog': CATALOG, 'last_seen': None})
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertTrue(data['success'])
        self.assertFalse(data['is_fallback'])
        self.assertEqual([e['version'] for e in data['entries']], ['1.1.1', '1.1.0', '1.0.0'])

    def test_whats_new_missing_last_seen_is_first_run(self):
        response = self.client.post('/api/whats-new', json={'catalog': CATALOG})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['count'], 3)

    def test_whats_new_since_last_seen(self):
        response = self.client.post('/api/whats-new', json={'catalog': CATALOG, 'last_seen': '1.1.0'})
        data = response.get_json()
        self.assertEqual([e['version'] for e in data['entries']], ['1.1.1'])
        self.assertEqual(data['entries'][0]['heading'], 'Version 1.1.1')

    def test_whats_new_caught_up_returns_fallback(self):
        response = self.client.post('/api/whats-new', json={'catalog': CATALOG, 'last_seen': '1.1.1'})
        data = response.get_json()
        self.assertTrue(data['is_fallback'])
        self.assertEqual(data['count'], 0)
        self.assertEqual(data['entries'][0]['title'], 'Minor Improvements')

    def test_whats_new_caught_up_without_fallback(self):
        response = self.client.post(
            '/api/whats-new', json={'catalog': CATALOG, 'last_seen': '5.0.0', 'fallback': False}
        )
        data = response.get_json()
        self.assertEqual(data['entries'], [])
        self.assertFalse(data['is_fallback'])

    def test_whats_new_keeps_change_order(self):
        response = self.client.post('/api/whats-new', json={'catalog': CATALOG, 'last_seen': '1.0.0'})
        entry = response.get_json()['entries'][1]
        self.assertEqual([c['title'] for c in entry['changes']], ['Visual Improvements', 'Bug Fixes'])

    def test_whats_new_requires_json_body(self):
        response = self.client.post('/api/whats-new', data='not json', content_type='application/json')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()['error']['code'], 'VALIDATION_ERROR')

    def test_whats_new_rejects_malformed_release(self):
        response = self.client.post('/api/whats-new', json={'catalog': [{'version': '1.0'}]})
        self.assertEqual(response.status_code, 400)
        data = response.get_json()
        self.assertFalse(data['success'])
        self.assertIn('0', data['error']['details']['releases'])

    def test_whats_new_rejects_non_string_last_seen(self):
        response = self.client.post('/api/whats-new', json={'catalog': CATALOG, 'last_seen': 110})
        self.assertEqual(response.status_code, 400)

    def test_whats_new_rejects_non_bool_fallback(self):
        response = self.client.post('/api/whats-new', json={'catalog': CATALOG, 'fallback': 'no'})
        self.assertEqual(response.status_code, 400)

    @patch('whatsnew.services.changelog_service.MAX_CATALOG_SIZE', 1)
    def test_whats_new_rejects_oversized_catalog(self):
        response = self.client.post('/api/whats-new', json={'catalog': CATALOG})
        self.assertEqual(response.status_code, 413)
        self.assertEqual(response.get_json()['error']['code'], 'PAYLOAD_TOO_LARGE')

    def test_changelog_lists_newest_first(self):
        response = self.client.post('/api/changelog', json={'catalog': list(reversed(CATALOG))})
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data['count'], 3)
        self.assertEqual([e['version'] for e in data['entries']], ['1.1.1', '1.1.0', '1.0.0'])

    def test_changelog_requires_post(self):
        response = self.client.get('/api/changelog')
        self.assertEqual(response.status_code, 405)
        self.assertEqual(response.get_json()['error']['code'], 'METHOD_NOT_ALLOWED')

    def test_whats_new_very_long_version(self):
        huge = '9' * 5000
        catalog = CATALOG + [{'version': huge, 'title': 'Far future', 'changes': []}]
        response = self.client.post('/api/whats-new', json={'catalog': catalog, 'last_seen': '1.1.1'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([e['version'] for e in response.get_json()['entries']], [huge])

    def test_version_compare(self):
        response = self.client.get('/api/version/compare?lhs=1.2.9&rhs=1.2.10')
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertTrue(data['is_less'])
        self.assertFalse(data['equal'])

    def test_version_compare_trailing_zero(self):
        data = self.client.get('/api/version/compare?lhs=1.2&rhs=1.2.0').get_json()
        self.assertTrue(data['equal'])
        self.assertFalse(data['is_less'])
        self.assertFalse(data['is_greater'])

    def test_version_compare_invalid(self):
        response = self.client.get('/api/version/compare?lhs=abc&rhs=1.0')
        self.assertEqual(response.status_code, 400)
        self.assertIn('lhs', response.get_json()['error']['details'])

    def test_error_handler_404(self):
        response = self.client.get('/api/nonexistent')
        self.assertEqual(response.status_code, 404)
        data = response.get_json()
        self.assertEqual(data['error']['code'], 'NOT_FOUND')


if __name__ == '__main__':
    unittest.main()
