"""Services package"""
from gauge_assistant.services.topic_classifier import topic_classifier
from gauge_assistant.services.prompt_builder import prompt_builder
from gauge_assistant.services.llm_service import llm_service
