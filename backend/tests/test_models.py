"""
Unit Tests for Schemas and Errors
=================================
Tests for Pydantic schemas, settings and the error taxonomy
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))


class TestPydanticSchemas:
    """Tests for Pydantic request/response schemas"""

    def test_query_request_valid(self):
        """Test valid query request keeps the original text"""
        from gauge_assistant.models.schemas import QueryRequest

        request = QueryRequest(question="  What is Gauge.io?  ")

        assert request.question == "  What is Gauge.io?  "

    @pytest.mark.parametrize("question", ["", "   ", "\n\t"])
    def test_query_request_blank(self, question):
        """Test blank questions are rejected"""
        from gauge_assistant.models.schemas import QueryRequest
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            QueryRequest(question=question)

    @pytest.mark.parametrize("question", [42, None, ["a"], {"text": "hi"}])
    def test_query_request_non_string(self, question):
        """Test non-string questions are not coerced"""
        from gauge_assistant.models.schemas import QueryRequest
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            QueryRequest(question=question)

    def test_query_response_shape(self):
        """Test answer envelope serialization"""
        from gauge_assistant.models.schemas import QueryResponse

        response = QueryResponse(answer="Hello", blocked=False)

        assert response.model_dump() == {"answer": "Hello", "blocked": False}


class TestErrors:
    """Tests for the error taxonomy"""

    def test_validation_error_exposes_message(self):
        from gauge_assistant.exceptions import QueryValidationError

        error = QueryValidationError("Question is required")

        assert error.status_code == 400
        assert error.public_message == "Question is required"

    def test_method_not_allowed_status(self):
        from gauge_assistant.exceptions import QueryValidationError

        error = QueryValidationError("Method not allowed", status_code=405)

        assert error.status_code == 405

    def test_generation_errors_are_generic(self):
        from gauge_assistant.exceptions import (
            ConfigurationError, GenerationError, GENERIC_ERROR_MESSAGE
        )

        for error in (GenerationError("timeout"), ConfigurationError("GROQ_API_KEY missing")):
            assert error.status_code == 500
            assert error.public_message == GENERIC_ERROR_MESSAGE

    def test_configuration_error_is_generation_error(self):
        from gauge_assistant.exceptions import ConfigurationError, GenerationError

        assert issubclass(ConfigurationError, GenerationError)


class TestSettings:
    """Tests for Settings helpers"""

    def test_development_flag(self):
        from gauge_assistant.config import Settings

        assert Settings(environment="development").is_development
        assert Settings(environment=" Development ").is_development
        assert not Settings(environment="production").is_development

    def test_cors_origins_list(self):
        from gauge_assistant.config import Settings

        settings = Settings(cors_origins="https://gauge.io, http://localhost:5173")

        assert settings.cors_origins_list == ["https://gauge.io", "http://localhost:5173"]
