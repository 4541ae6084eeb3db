"""GetResponse API integration."""

import logging
from concurrent.futures import ThreadPoolExecutor

from espconnect.conf import get_getresponse_api_url, get_lists_page_size, get_stats_max_workers
from espconnect.providers import ConnectionValidation, ListsResult

from .base import PROVIDER_FAILURES, BaseProviderClient

logger = logging.getLogger(__name__)

# Statistics of a campaign, keyed by normalized name and GetResponse name.
CAMPAIGN_STATISTICS = {
    "subscribersCount": "subscriptions",
    "activeSubscribers": "active",
    "unsubscribedCount": "unsubscriptions",
    "removedCount": "removed",
    "complaintsCount": "complaints",
}


class GetResponseClient(BaseProviderClient):
    """
    GetResponse API integration.

    Lists are called campaigns by GetResponse. The campaigns endpoint does not
    return statistics, so they are fetched with one extra call per campaign.
    """

    name = "getresponse"
    unauthorized_message = "Invalid API key or unauthorized access"
    default_error_message = "GetResponse API error"
    classify_not_found = True

    def __init__(self, api_key: str, timeout: int | None = None):
        """Configure the client on the fixed API endpoint."""
        super().__init__(api_key, timeout=timeout)
        self.base_url = get_getresponse_api_url()

    def get_request_kwargs(self) -> dict:
        """Authenticate with the API key header."""
        return {
            "headers": {
                "X-Auth-Token": f"api-key {self._api_key}",
                "Content-Type": "application/json",
            }
        }

    def extract_error_message(self, payload: dict) -> str | None:
        """Return the message of a GetResponse error payload."""
        return payload.get("message") or payload.get("error")

    def validate_connection(self) -> ConnectionValidation:
        """Validate the key by fetching the account details."""
        try:
            account = self.get("/accounts")
            account_info = {
                "accountId": account.get("accountId"),
                "firstName": account.get("firstName"),
                "lastName": account.get("lastName"),
                "email": account.get("email"),
                "companyName": account.get("companyName") or "N/A",
                "phone": account.get("phone") or "N/A",
            }
        except PROVIDER_FAILURES as exc:
            return ConnectionValidation(is_valid=False, error=self.fail("connection validation", exc))

        return ConnectionValidation(is_valid=True, account_info=account_info)

    def get_lists(self) -> ListsResult:
        """Fetch campaigns, newest first, each with its statistics."""
        try:
            campaigns = self.get(
                "/campaigns",
                params={"perPage": get_lists_page_size(), "sort[createdOn]": "desc"},
            )
            lists = self._with_statistics(campaigns)
        except PROVIDER_FAILURES as exc:
            return ListsResult(success=False, error=self.fail("lists retrieval", exc))

        return ListsResult(success=True, lists=lists)

    def _with_statistics(self, campaigns: list[dict]) -> list[dict]:
        """Fetch statistics of all campaigns concurrently, keeping the campaigns order."""
        if not campaigns:
            return []

        workers = min(get_stats_max_workers(), len(campaigns))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(self._campaign_entry, campaigns))

    def _campaign_entry(self, campaign: dict) -> dict:
        statistics = self.get_campaign_statistics(campaign["campaignId"])
        return {
            "id": campaign["campaignId"],
            "name": campaign.get("name"),
            "description": campaign.get("description") or "",
            "languageCode": campaign.get("languageCode"),
            "isDefault": campaign.get("isDefault") or False,
            "createdAt": campaign.get("createdOn"),
            **{key: statistics.get(source) or 0 for key, source in CAMPAIGN_STATISTICS.items()},
        }

    def get_campaign_statistics(self, campaign_id: str) -> dict:
        """
        Return the statistics of a campaign.

        A failing call must not fail the whole lists retrieval: the campaign is
        then reported with empty statistics.
        """
        try:
            statistics = self.get(f"/campaigns/{campaign_id}/statistics")
        except PROVIDER_FAILURES as exc:
            logger.warning("Could not fetch statistics of getresponse campaign %s: %s", campaign_id, exc)
            return {}

        if not isinstance(statistics, dict):
            return {}
        return statistics
