"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Instantiating the core Singleton services (Repositories, Adapters, Engine).
2. Wiring them together (e.g., injecting the step store and guide catalog into the Engine).
3. Managing the lifecycle of these objects using @lru_cache to ensure
   they are created only once per application process.

By consolidating construction logic here, we keep the API layer (main.py)
clean and strictly focused on routing, while allowing for easy dependency
overrides during testing.
"""


from functools import lru_cache
from fastapi import Depends, HTTPException, status

from ..config import settings
from ..data.sample_data import TROUBLESHOOT_STEPS
from ..llm.interface import LLMProvider
from ..llm.adapters.openai_adapter import OpenAIAdapter
from ..repositories.guide import GuideRepository, StaticGuideRepository
from ..repositories.machine import MachineRepository, StaticMachineRepository
from ..repositories.session import SessionRepository, InMemorySessionRepository
from ..repositories.step import StepRepository, InMemoryStepRepository
from ..execution.walkthrough import WalkthroughEngine
from ..services.assistant import GuideAssistant
from ..services.smart_plug import SmartPlugProvider, StubSmartPlugProvider
from ..services.troubleshooting import TroubleshootingService

# LLM Provider (Singleton)
@lru_cache()
def get_llm_provider() -> LLMProvider:
    if not settings.OPENAI_API_KEY:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="The guide assistant is not configured (OPENAI_API_KEY is missing).",
        )
    return OpenAIAdapter(
        api_key=settings.OPENAI_API_KEY,
        model_name=settings.OPENAI_MODEL
    )

# Step Graph Store (Singleton)
# Note: In-memory storage must be a singleton so edits persist across requests!
@lru_cache()
def get_step_repository() -> StepRepository:
    return InMemoryStepRepository(
        TROUBLESHOOT_STEPS, entry_point_id=settings.ENTRY_POINT_ID
    )

# Guide Catalog (Singleton)
@lru_cache()
def get_guide_repository() -> GuideRepository:
    return StaticGuideRepository()

# Machine list (Singleton)
@lru_cache()
def get_machine_repository() -> MachineRepository:
    return StaticMachineRepository()

# Session Repository (Singleton)
@lru_cache()
def get_session_repository() -> SessionRepository:
    return InMemorySessionRepository()

# Smart plug provider (Singleton)
@lru_cache()
def get_smart_plug_provider() -> SmartPlugProvider:
    return StubSmartPlugProvider()

# The Engine (Singleton Service)
@lru_cache()
def get_walkthrough_engine(
    store: StepRepository = Depends(get_step_repository),
    guides: GuideRepository = Depends(get_guide_repository)
) -> WalkthroughEngine:
    return WalkthroughEngine(store=store, guide_catalog=guides)

# The Troubleshooting Service (Singleton Service)
@lru_cache()
def get_troubleshooting_service(
    session_repo: SessionRepository = Depends(get_session_repository),
    engine: WalkthroughEngine = Depends(get_walkthrough_engine),
    machine_repo: MachineRepository = Depends(get_machine_repository)
) -> TroubleshootingService:
    """
    Injects all necessary components into the TroubleshootingService.
    """
    return TroubleshootingService(
        session_repository=session_repo,
        engine=engine,
        machine_repository=machine_repo
    )

# The Guide Assistant (Singleton Service)
@lru_cache()
def get_guide_assistant(
    llm: LLMProvider = Depends(get_llm_provider),
    guides: GuideRepository = Depends(get_guide_repository)
) -> GuideAssistant:
    return GuideAssistant(llm_provider=llm, guide_catalog=guides)
