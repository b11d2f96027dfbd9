import unittest

from faker import Faker

from auth import PasswordHasher


class TestPasswordHasher(unittest.TestCase):
    def setUp(self) -> None:
        self.faker = Faker()
        self.hasher = PasswordHasher()

    def test_hash_verify(self) -> None:
        password = self.faker.password()
        password_hash = self.hasher.hash(password)

        self.assertNotEqual(password_hash, password)
        self.assertTrue(self.hasher.verify(password, password_hash))
        self.assertFalse(self.hasher.verify(password + 'x', password_hash))

    def test_verify_invalid_hash(self) -> None:
        self.assertFalse(self.hasher.verify(self.faker.password(), self.faker.pystr()))
