"""
Integration tests for the journy.io client.

Tests:
- Multi-step workflows
- End-to-end scenarios
- Handling rate limits across calls
"""

from datetime import datetime, timezone

from journy_sdk import (
    AccountIdentity,
    Event,
    HttpResponse,
    JournyClient,
    UserIdentity,
)


class TestOnboardingWorkflow:
    """Test a typical sign-up flow."""

    def test_signup_workflow(self, journy_client, mock_transport):
        """Workflow: link visitor, upsert user and account, add member, track event."""
        mock_transport.send.side_effect = [
            HttpResponse(201, {"x-ratelimit-remaining": "1999", "x-ratelimit-limit": "2000"}, None),
            HttpResponse(201, {"x-ratelimit-remaining": "1998", "x-ratelimit-limit": "2000"}, None),
            HttpResponse(201, {"x-ratelimit-remaining": "1997", "x-ratelimit-limit": "2000"}, None),
            HttpResponse(201, {"x-ratelimit-remaining": "1996", "x-ratelimit-limit": "2000"}, None),
            HttpResponse(201, {"x-ratelimit-remaining": "1995", "x-ratelimit-limit": "2000"}, None),
        ]
        user = UserIdentity(user_id="user_123", email="jane@acme.com")
        account = AccountIdentity(account_id="acc_1", domain="acme.com")
        signed_up = datetime(2024, 1, 2, 9, 0, 0, tzinfo=timezone.utc)

        results = [
            journy_client.link("device_abc", user),
            journy_client.upsert_user(user, {"first_name": "Jane", "signed_up_at": signed_up}),
            journy_client.upsert_account(account, {"plan": "trial"}),
            journy_client.add_users_to_account(account, [user]),
            journy_client.add_event(
                Event.for_user_in_account("signed_up", user, account).happened_at(signed_up)
            ),
        ]

        assert all(result.succeeded for result in results)
        assert [result.remaining_requests for result in results] == [1999, 1998, 1997, 1996, 1995]

        paths = [call[0][0].url for call in mock_transport.send.call_args_list]
        assert paths == [
            "https://api.journy.io/link",
            "https://api.journy.io/users/upsert",
            "https://api.journy.io/accounts/upsert",
            "https://api.journy.io/accounts/users/add",
            "https://api.journy.io/track",
        ]


class TestRateLimitWorkflow:
    """Test caller-side handling of rate limits."""

    def test_caller_stops_when_rate_limited(self, journy_client, mock_transport):
        """Workflow: send events until the API reports a rate limit."""
        mock_transport.send.side_effect = [
            HttpResponse(201, {"x-ratelimit-remaining": "1", "x-ratelimit-limit": "2"}, None),
            HttpResponse(429, {"x-ratelimit-remaining": "0", "x-ratelimit-limit": "2"}, None),
        ]

        sent = 0
        for i in range(5):
            result = journy_client.add_event(
                Event.for_user("page_view", UserIdentity.by_user_id(f"user_{i}"))
            )
            if result.rate_limited:
                break
            sent += 1

        assert sent == 1
        assert result.succeeded is False
        assert result.remaining_requests == 0
        assert result.max_requests == 2
        assert mock_transport.send.call_count == 2


class TestOffboardingWorkflow:
    """Test removing users and accounts."""

    def test_offboarding_workflow(self, mock_transport):
        """Workflow: remove member, delete user, delete account."""
        mock_transport.send.side_effect = [
            HttpResponse(204, {}, b""),
            HttpResponse(202, {}, None),
            HttpResponse(202, {}, None),
        ]
        user = UserIdentity.by_email("jane@acme.com")
        account = AccountIdentity.by_domain("acme.com")

        with JournyClient(mock_transport, "key") as client:
            removed = client.remove_users_from_account(account, [user])
            deleted_user = client.delete_user(user)
            deleted_account = client.delete_account(account)

        assert removed.succeeded and deleted_user.succeeded and deleted_account.succeeded
        assert [call[0][0].method for call in mock_transport.send.call_args_list] == [
            "POST", "DELETE", "DELETE"
        ]
        mock_transport.close.assert_called_once()
