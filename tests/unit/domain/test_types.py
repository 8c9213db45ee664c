import pytest

from quacker.domain.types import DomainName


class TestDomain:
    def test_could_eq_like_str(self):
        domain = DomainName("quacker")
        assert domain == "quacker"

    def test_could_be_str_separated(self):
        domain = DomainName("quacker.message")
        assert domain == "quacker.message"

    def test_could_get_parent_domain(self):
        domain = DomainName("quacker.message")
        assert domain.part_of == "quacker"
        assert DomainName("quacker").part_of is None

    def test_must_return_same_instance(self):
        domain = DomainName("quacker")
        assert DomainName(domain) is domain

    @pytest.mark.parametrize("domain", ("test--domain", "test.domain:ru", "test,domain, test_domain", "1", "Camel"))
    def test_must_be_lowecase_digits_or_str(self, domain):
        with pytest.raises(ValueError):
            DomainName(domain)
