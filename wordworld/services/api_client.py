"""Client for the WordWorld backend API."""

import logging
from typing import Any

import requests

from wordworld.adapters import profile_from_payload, session_to_payload, word_from_payload
from wordworld.config import WordWorldConfig
from wordworld.exceptions import ApiConnectionError, ApiRequestError, AuthenticationError
from wordworld.models import LearnerProfile, LearningSession, Word

logger = logging.getLogger(__name__)


class BackendClient:
    """Fetch learner data from, and persist sessions to, the backend API.

    Requests are JSON over HTTP(S). When a token is configured it is sent as
    a bearer token; a 401 answer clears it so stale credentials are not reused.
    """

    def __init__(self, config: WordWorldConfig, session: requests.Session | None = None):
        """Initialize the backend client.

        Args:
            config: Configuration with the API base URL, token and timeout
            session: Optional requests session (a new one is created if omitted)
        """
        self.config = config
        self.token = config.api_token
        self._http = session or requests.Session()

    def request(
        self,
        method: str,
        endpoint: str,
        payload: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make an API request and return the decoded JSON body.

        Args:
            method: HTTP method
            endpoint: Path relative to the API base URL (leading slash)
            payload: JSON body, if any
            params: Query parameters, if any

        Returns:
            Decoded JSON, or None for empty responses

        Raises:
            ApiConnectionError: If the backend cannot be reached
            AuthenticationError: If the backend answers 401
            ApiRequestError: For any other error answer or an undecodable body
        """
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        url = f"{self.config.api_base_url}{endpoint}"
        try:
            response = self._http.request(
                method,
                url,
                json=payload,
                params=params,
                headers=headers,
                timeout=self.config.api_timeout,
            )
        except requests.exceptions.ConnectionError as e:
            raise ApiConnectionError(f"Cannot connect to backend at {url}") from e
        except requests.exceptions.Timeout as e:
            raise ApiConnectionError(f"Backend request timed out: {method} {endpoint}") from e
        except requests.RequestException as e:
            raise ApiRequestError(f"Request failed: {e}") from e

        if not response.ok:
            detail = self._error_detail(response)
            logger.warning(f"{method} {endpoint} failed with HTTP {response.status_code}: {detail}")
            if response.status_code == 401:
                self.token = None
                raise AuthenticationError(detail, status_code=401)
            raise ApiRequestError(detail, status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiRequestError(
                f"Invalid JSON in response to {method} {endpoint}",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("detail"):
            return str(body["detail"])
        return f"HTTP {response.status_code}"

    def get_child(self, child_id: str) -> LearnerProfile:
        """Fetch a child's learner profile."""
        return profile_from_payload(self.request("GET", f"/children/{child_id}"))

    def get_words_with_progress(self, child_id: str, category: str | None = None) -> list[Word]:
        """Fetch the word catalog with a child's progress on each word.

        Args:
            child_id: Child to fetch progress for
            category: Optional category filter

        Returns:
            List of words
        """
        params = {"category": category} if category else None
        payload = self.request("GET", f"/vocabulary/child/{child_id}", params=params)
        words = [word_from_payload(item) for item in payload or []]
        logger.info(f"Fetched {len(words)} words for child {child_id}")
        return words

    def start_session(self, child_id: str, start_time: str) -> str:
        """Open a learning session on the backend and return its id."""
        result = self.request(
            "POST",
            "/progress/session",
            payload={"child_id": child_id, "start_time": start_time},
        )
        return str(result["id"])

    def end_session(self, session_id: str, session: LearningSession) -> None:
        """Close a learning session, uploading what happened in it."""
        payload = session_to_payload(session)
        payload["end_time"] = payload.pop("date")
        self.request("PATCH", f"/progress/session/{session_id}", payload=payload)

    def get_progress_stats(self, child_id: str) -> dict[str, Any]:
        """Fetch the backend's progress statistics for a child (raw payload)."""
        return self.request("GET", f"/progress/{child_id}/stats")

