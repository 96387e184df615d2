"""Unit tests for auth_service module."""

import os
import unittest
from unittest.mock import patch

from adapter.memory.user_repository import InMemoryUserRepository
from domain.model.errors import AuthenticationError, ValidationError
from services import auth_service


class TestPasswordHashing(unittest.TestCase):

    def setUp(self):
        patcher = patch.object(auth_service, 'BCRYPT_ROUNDS', 4)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_hash_is_not_plain_text_and_verifies(self):
        hashed = auth_service.hash_password('s3cret')

        self.assertNotEqual(hashed, 's3cret')
        self.assertTrue(auth_service.verify_password('s3cret', hashed))
        self.assertFalse(auth_service.verify_password('wrong', hashed))

    def test_hash_rejects_password_over_72_bytes(self):
        with self.assertRaises(ValidationError):
            auth_service.hash_password('x' * 73)

    def test_verify_never_matches_password_over_72_bytes(self):
        hashed = auth_service.hash_password('x' * 72)
        self.assertFalse(auth_service.verify_password('x' * 73, hashed))


class TestAuthenticate(unittest.TestCase):

    def setUp(self):
        patcher = patch.object(auth_service, 'BCRYPT_ROUNDS', 4)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.repo = InMemoryUserRepository()
        self.user = self.repo.create(
            email='ann@example.com',
            password_hash=auth_service.hash_password('s3cret'),
            first_name='Ann',
            last_name='Lee',
        )

    def test_authenticate_success_sets_last_login(self):
        self.assertIsNone(self.user.last_login)

        user = auth_service.authenticate(self.repo, 'ann@example.com', 's3cret')

        self.assertEqual(user.id, self.user.id)
        self.assertIsNotNone(user.last_login)
        self.assertEqual(self.repo.get_by_id(user.id).last_login, user.last_login)

    def test_unknown_email_and_wrong_password_fail_identically(self):
        with self.assertRaises(AuthenticationError) as unknown:
            auth_service.authenticate(self.repo, 'nobody@example.com', 's3cret')
        with self.assertRaises(AuthenticationError) as wrong:
            auth_service.authenticate(self.repo, 'ann@example.com', 'nope')

        self.assertEqual(str(unknown.exception), str(wrong.exception))
        self.assertEqual(str(wrong.exception), auth_service.INVALID_CREDENTIALS)

    def test_failed_login_does_not_touch_last_login(self):
        with self.assertRaises(AuthenticationError):
            auth_service.authenticate(self.repo, 'ann@example.com', 'nope')
        self.assertIsNone(self.repo.get_by_id(self.user.id).last_login)


class TestReadBcryptRounds(unittest.TestCase):

    def test_default_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(auth_service.read_bcrypt_rounds(), 12)

    def test_valid_value(self):
        with patch.dict(os.environ, {'BCRYPT_ROUNDS': '10'}):
            self.assertEqual(auth_service.read_bcrypt_rounds(), 10)

    def test_invalid_values_fall_back_with_warning(self):
        for raw in ('twelve', '', '3', '32'):
            with self.subTest(raw=raw), patch.dict(os.environ, {'BCRYPT_ROUNDS': raw}):
                with self.assertLogs('services.auth_service', level='WARNING') as logs:
                    self.assertEqual(auth_service.read_bcrypt_rounds(), 12)
                self.assertIn('BCRYPT_ROUNDS', logs.output[0])


if __name__ == '__main__':
    unittest.main()
