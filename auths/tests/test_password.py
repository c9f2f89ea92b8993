# auths/tests/test_password.py
"""
Forgot-password and change-password endpoints
"""
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.core import mail
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from auths.services import TEMP_PASSWORD_LENGTH, generate_temp_password
from auths.views.password import FORGOT_PASSWORD_MESSAGE

User = get_user_model()


class ForgotPasswordViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse('forgot_password')
        self.user = User.objects.create_user(
            username='alice',
            email='alice@example.com',
            password='OldPassw0rd!',
            real_name='Alice',
        )

    def test_known_email_gets_temporary_password(self):
        with patch('auths.views.password.generate_temp_password', return_value='Tmp12345ab'):
            response = self.client.post(self.url, {'email': 'alice@example.com'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], FORGOT_PASSWORD_MESSAGE)

        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('Tmp12345ab'))
        self.assertFalse(self.user.check_password('OldPassw0rd!'))
        self.assertTrue(self.user.must_change_password)

        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ['alice@example.com'])
        self.assertIn('Tmp12345ab', mail.outbox[0].body)

    def test_email_lookup_ignores_case(self):
        response = self.client.post(self.url, {'email': 'ALICE@example.com'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(mail.outbox), 1)

    def test_unknown_email_answers_the_same(self):
        response = self.client.post(self.url, {'email': 'nobody@example.com'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['message'], FORGOT_PASSWORD_MESSAGE)
        self.assertEqual(len(mail.outbox), 0)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('OldPassw0rd!'))
        self.assertFalse(self.user.must_change_password)

    def test_invalid_email_is_rejected(self):
        response = self.client.post(self.url, {'email': 'not-an-email'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('email', response.data['data'])


class ChangePasswordViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse('auth-change-password')
        self.user = User.objects.create_user(
            username='bob',
            email='bob@example.com',
            password='Tmp12345ab',
            real_name='Bob',
            must_change_password=True,
        )

    def test_change_clears_the_flag(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.post(
            self.url,
            {'old_password': 'Tmp12345ab', 'new_password': 'Brand-New-Secret-42'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password('Brand-New-Secret-42'))
        self.assertFalse(self.user.must_change_password)

    def test_wrong_old_password(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.post(
            self.url,
            {'old_password': 'wrong', 'new_password': 'Brand-New-Secret-42'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Invalid password.')
        self.assertIn('old_password', response.data['data'])

    def test_same_password_is_rejected(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.post(
            self.url,
            {'old_password': 'Tmp12345ab', 'new_password': 'Tmp12345ab'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('new_password', response.data['data'])

    def test_weak_password_is_rejected(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.post(
            self.url,
            {'old_password': 'Tmp12345ab', 'new_password': '123'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_requires_authentication(self):
        response = self.client.post(
            self.url,
            {'old_password': 'Tmp12345ab', 'new_password': 'Brand-New-Secret-42'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class SessionViewTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        User.objects.create_user(
            username='carol',
            email='carol@example.com',
            password='Carol-Secret-9',
            real_name='Carol',
            identity='teacher',
            must_change_password=True,
        )

    def test_login_returns_tokens_and_flags(self):
        response = self.client.post(
            reverse('token_obtain_pair'),
            {'username': 'carol', 'password': 'Carol-Secret-9'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data)
        self.assertIn('refresh', response.data)
        self.assertEqual(response.data['identity'], 'teacher')
        self.assertTrue(response.data['must_change_password'])

    def test_refresh_issues_new_access_token(self):
        login = self.client.post(
            reverse('token_obtain_pair'),
            {'username': 'carol', 'password': 'Carol-Secret-9'},
            format='json',
        )

        response = self.client.post(
            reverse('token_refresh'), {'refresh': login.data['refresh']}, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('access', response.data)

    def test_wrong_credentials(self):
        response = self.client.post(
            reverse('token_obtain_pair'),
            {'username': 'carol', 'password': 'nope'},
            format='json',
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


def test_temp_password_shape():
    password = generate_temp_password()
    assert len(password) == TEMP_PASSWORD_LENGTH
    assert password.isalnum()
