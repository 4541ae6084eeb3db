"""Fixtures for the test suite."""

import pytest
import responses

MAILCHIMP_URL = "https://us6.api.mailchimp.com/3.0"
GETRESPONSE_URL = "https://api.getresponse.com/v3"


@pytest.fixture(name="mocked_responses")
def fixture_mocked_responses():
    """Activate responses for the test, every outbound call must be mocked."""
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mocked:
        yield mocked


@pytest.fixture(name="mailchimp_account")
def fixture_mailchimp_account():
    """Return the payload of the Mailchimp API root."""
    return {
        "account_id": "8d3a3db4d97663a9074efcc16",
        "account_name": "Acme",
        "email": "owner@acme.example",
        "role": "owner",
    }


@pytest.fixture(name="getresponse_account")
def fixture_getresponse_account():
    """Return the payload of the GetResponse accounts endpoint."""
    return {
        "accountId": "VfEy1",
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@acme.example",
        "companyName": "Acme",
        "phone": None,
    }
