from unittest.mock import Mock

import pytest
import requests

from quizzler.quiz.adapters.opentdb_gateway import OpenTriviaGateway
from quizzler.quiz.domain.errors import FetchErrorKind
from quizzler.quiz.domain.models import Category

CATEGORY_URL = "https://trivia.test/api_category.php"
QUESTION_URL = "https://trivia.test/api.php"

QUESTION_BODY = {
    "response_code": 0,
    "results": [
        {
            "type": "multiple",
            "difficulty": "easy",
            "category": "Science: Computers",
            "question": "What does &quot;CPU&quot; stand for?",
            "correct_answer": "Central Processing Unit",
            "incorrect_answers": [
                "Central Process Unit",
                "Computer Personal Unit",
                "Central Processor Unit",
            ],
        },
        {
            "type": "boolean",
            "difficulty": "medium",
            "category": "Science: Computers",
            "question": "Linux was first created as an alternative to Windows XP.",
            "correct_answer": "False",
            "incorrect_answers": ["True"],
        },
    ],
}


def make_response(status=200, body=None, reason="OK", json_error=False):
    response = Mock(spec=requests.Response)
    response.status_code = status
    response.ok = 200 <= status < 400
    response.reason = reason
    if json_error:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def http():
    return Mock(spec=requests.Session)


@pytest.fixture
def gateway(http):
    return OpenTriviaGateway(
        category_url=CATEGORY_URL, question_url=QUESTION_URL, timeout=3, session=http
    )


class TestFetchCategories:
    def test_parses_category_list(self, gateway, http):
        http.get.return_value = make_response(
            body={"trivia_categories": [{"id": 9, "name": "General Knowledge"}, {"id": 10, "name": "Entertainment: Books"}]}
        )

        result = gateway.fetch_categories()

        assert result.ok
        assert result.value == [
            Category(id="9", name="General Knowledge"),
            Category(id="10", name="Entertainment: Books"),
        ]
        http.get.assert_called_once_with(CATEGORY_URL, params=None, timeout=3)

    def test_wrong_shape_is_malformed(self, gateway, http):
        http.get.return_value = make_response(body={"categories": []})

        result = gateway.fetch_categories()

        assert result.error.kind == FetchErrorKind.MALFORMED_PAYLOAD

    def test_connection_error_is_network_failure(self, gateway, http):
        http.get.side_effect = requests.ConnectionError("refused")

        result = gateway.fetch_categories()

        assert not result.ok
        assert result.error.kind == FetchErrorKind.NETWORK_FAILURE


class TestFetchQuestions:
    def test_parses_questions_without_decoding(self, gateway, http):
        http.get.return_value = make_response(body=QUESTION_BODY)

        result = gateway.fetch_questions("18", 2)

        assert result.ok
        first, second = result.value
        assert first.text == "What does &quot;CPU&quot; stand for?"
        assert first.correct_answer == "Central Processing Unit"
        assert len(first.incorrect_answers) == 3
        assert first.category == "Science: Computers"
        assert second.type == "boolean"
        assert second.incorrect_answers == ("True",)

    def test_sends_category_and_amount(self, gateway, http):
        http.get.return_value = make_response(body=QUESTION_BODY)

        gateway.fetch_questions("18", 10)

        http.get.assert_called_once_with(
            QUESTION_URL, params={"amount": 10, "category": "18"}, timeout=3
        )

    @pytest.mark.parametrize("category_id", [None, ""])
    def test_omits_category_for_any_category(self, gateway, http, category_id):
        http.get.return_value = make_response(body=QUESTION_BODY)

        gateway.fetch_questions(category_id, 10)

        http.get.assert_called_once_with(QUESTION_URL, params={"amount": 10}, timeout=3)

    def test_timeout_is_network_failure(self, gateway, http):
        http.get.side_effect = requests.Timeout("slow")

        result = gateway.fetch_questions(None, 10)

        assert result.error.kind == FetchErrorKind.NETWORK_FAILURE

    def test_http_error_is_bad_status(self, gateway, http):
        http.get.return_value = make_response(status=503, reason="Service Unavailable")

        result = gateway.fetch_questions(None, 10)

        assert result.error.kind == FetchErrorKind.BAD_STATUS
        assert "503" in result.error.detail

    def test_non_json_body_is_malformed(self, gateway, http):
        http.get.return_value = make_response(json_error=True)

        result = gateway.fetch_questions(None, 10)

        assert result.error.kind == FetchErrorKind.MALFORMED_PAYLOAD

    def test_record_missing_fields_is_malformed(self, gateway, http):
        http.get.return_value = make_response(
            body={"response_code": 0, "results": [{"question": "Q?"}]}
        )

        result = gateway.fetch_questions(None, 10)

        assert result.error.kind == FetchErrorKind.MALFORMED_PAYLOAD

    def test_provider_no_results_code(self, gateway, http):
        http.get.return_value = make_response(body={"response_code": 1, "results": []})

        result = gateway.fetch_questions("30", 10)

        assert result.error.kind == FetchErrorKind.NO_QUESTIONS_AVAILABLE

    def test_empty_results_is_no_questions(self, gateway, http):
        http.get.return_value = make_response(body={"response_code": 0, "results": []})

        result = gateway.fetch_questions(None, 10)

        assert result.error.kind == FetchErrorKind.NO_QUESTIONS_AVAILABLE

    @pytest.mark.parametrize("code", [2, 5])
    def test_provider_error_codes_are_bad_status(self, gateway, http, code):
        http.get.return_value = make_response(body={"response_code": code, "results": []})

        result = gateway.fetch_questions(None, 10)

        assert result.error.kind == FetchErrorKind.BAD_STATUS

    def test_single_attempt_only(self, gateway, http):
        http.get.side_effect = requests.ConnectionError("down")

        gateway.fetch_questions(None, 10)

        assert http.get.call_count == 1

    @pytest.mark.parametrize("count", [0, 51])
    def test_rejects_count_outside_provider_limit(self, gateway, count):
        with pytest.raises(ValueError):
            gateway.fetch_questions(None, count)
