"""Unit tests for API dependencies — repository and service wiring."""

import unittest
from unittest.mock import MagicMock, patch

from fastapi import HTTPException

from api.dependencies import get_db, get_password_hasher, get_token_service, get_user_repo
from adapter.mongodb.user_repository import MongoUserRepository


def _request(mongo_client=None, database_name='invoicer') -> MagicMock:
    request = MagicMock()
    request.app.state.mongo_client = mongo_client
    request.app.state.settings.database_name = database_name
    return request


class TestGetDb(unittest.TestCase):

    def test_raises_503_when_mongodb_unavailable(self):
        with self.assertRaises(HTTPException) as context:
            get_db(_request(mongo_client=None))

        self.assertEqual(context.exception.status_code, 503)
        self.assertEqual(context.exception.detail, "Database unavailable")

    def test_uses_configured_database_name(self):
        client = MagicMock()

        db = get_db(_request(mongo_client=client, database_name='invoicer_test'))

        client.__getitem__.assert_called_once_with('invoicer_test')
        self.assertIs(db, client.__getitem__.return_value)


class TestGetUserRepo(unittest.TestCase):

    def test_returns_mongo_repository(self):
        self.assertIsInstance(get_user_repo(MagicMock()), MongoUserRepository)

    def test_passes_db_to_mongo_repository(self):
        mock_db = MagicMock()
        with patch('api.dependencies.MongoUserRepository') as mock_repo_class:
            get_user_repo(mock_db)
            mock_repo_class.assert_called_once_with(mock_db)

    def test_returns_protocol_compatible_object(self):
        repo = get_user_repo(MagicMock())

        for method in ['create', 'get_by_email', 'get_by_id', 'update_last_login']:
            self.assertTrue(callable(getattr(repo, method, None)), f"missing {method}")


class TestServiceDependencies(unittest.TestCase):

    def test_hasher_and_token_service_come_from_app_state(self):
        request = _request()

        self.assertIs(get_password_hasher(request), request.app.state.password_hasher)
        self.assertIs(get_token_service(request), request.app.state.token_service)


if __name__ == '__main__':
    unittest.main()
