import os
import logging
import streamlit as st

# --- OTel & Observability Imports ---
from opentelemetry import trace
from opentelemetry._logs import set_logger_provider
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource

# --- OTel Logging Imports ---
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.exporter.otlp.proto.grpc._log_exporter import OTLPLogExporter

# --- Prometheus Import ---
from prometheus_client import start_http_server

# --- Application Imports ---
from quizzler.config import QuizConfig
from quizzler.fsm import QuizState
from quizzler.quiz.adapters.opentdb_gateway import OpenTriviaGateway
from quizzler.quiz.presentation.state_provider import StreamlitStateProvider
from quizzler.quiz.presentation.viewmodel import QuizViewModel, session_gateway
from quizzler.quiz.presentation.views import components, question_view, start_view, summary_view


# --- 1. Configure Observability ---
def configure_observability():
    """
    Sends Traces and Logs over OTLP when the OTEL env vars are present.
    Starts a background Prometheus server for Metrics.
    """
    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    headers = os.getenv("OTEL_EXPORTER_OTLP_HEADERS")

    if endpoint and headers:
        resource = Resource.create({"service.name": "quizzler"})

        # --- A. TRACING SETUP ---
        trace_provider = TracerProvider(resource=resource)
        trace_provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, headers=headers))
        )
        trace.set_tracer_provider(trace_provider)

        # --- B. LOGGING SETUP ---
        logger_provider = LoggerProvider(resource=resource)
        logger_provider.add_log_record_processor(
            BatchLogRecordProcessor(OTLPLogExporter(endpoint=endpoint, headers=headers))
        )
        set_logger_provider(logger_provider)

        # Route the root logger (and every Telemetry logger) to OTel
        handler = LoggingHandler(level=logging.INFO, logger_provider=logger_provider)
        logging.getLogger().addHandler(handler)
    else:
        logging.getLogger(__name__).warning(
            "OTEL env vars not set. Telemetry will not be exported."
        )

    # --- C. METRICS SETUP (Prometheus) ---
    try:
        start_http_server(QuizConfig.METRICS_PORT)
        logging.getLogger(__name__).info(
            f"Prometheus metrics server started on port {QuizConfig.METRICS_PORT}"
        )
    except OSError:
        logging.getLogger(__name__).warning(
            f"Prometheus port {QuizConfig.METRICS_PORT} already in use (likely Streamlit reload). Skipping."
        )


# --- 2. Bootstrap Application ---
if "observability_configured" not in st.session_state:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(message)s')

    configure_observability()
    st.session_state.observability_configured = True


def main():
    st.set_page_config(page_title=QuizConfig.APP_TITLE, layout="centered")
    components.apply_styles()

    # --- 3. Dependency Injection (Composition Root) ---
    state_provider = StreamlitStateProvider()
    gateway = session_gateway(state_provider, OpenTriviaGateway)
    vm = QuizViewModel(gateway, state_provider)
    vm.load_categories()

    # --- 4. Sidebar ---
    state = vm.current_state
    category_id = components.render_sidebar(
        vm.categories, vm.selected_category, locked=state != QuizState.IDLE
    )

    # --- 5. Main Router (FSM) ---
    if state == QuizState.IDLE:
        start_view.render(vm, category_id)

    elif state == QuizState.AWAITING_ANSWER:
        current, total = vm.progress
        components.render_score(vm.score, current, total)
        question_view.render_active(vm)

    elif state == QuizState.ANSWERED:
        current, total = vm.progress
        components.render_score(vm.score, current, total)
        question_view.render_feedback(vm)

    elif state == QuizState.COMPLETED:
        summary_view.render(vm)

    if state != QuizState.IDLE and st.sidebar.button("Reset Quiz"):
        vm.reset()
        st.rerun()


if __name__ == "__main__":
    main()
