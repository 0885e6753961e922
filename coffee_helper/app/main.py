import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Depends, status
from fastapi.responses import Response

from ..config import settings
from ..domain.exceptions import (
    DependencyConflict,
    ImmutableFieldViolation,
    ProtectedEntryPoint,
    StepAlreadyExists,
    StepNotFoundError,
)
from ..domain.models import GuideCategory
from ..execution.renderer import render
from ..execution.validator import validate
from ..repositories.guide import GuideFilter, GuideRepository
from ..repositories.machine import MachineRepository
from ..repositories.step import StepRepository
from ..services.assistant import GuideAssistant
from ..services.exceptions import MachineNotFoundError, SessionNotFoundError
from ..services.smart_plug import SmartPlugProvider, format_duration
from ..services.troubleshooting import TroubleshootingService, WalkthroughTurn
from ..state.models import MachineSelection, Message
from .dependencies import (
    get_guide_assistant,
    get_guide_repository,
    get_machine_repository,
    get_smart_plug_provider,
    get_step_repository,
    get_troubleshooting_service,
)
from .schemas import (
    AnswerRequest,
    AssistantRequest,
    AssistantResponse,
    CreateSessionResponse,
    GuideRead,
    MachineRead,
    MachineSelectRequest,
    PlugStatusRead,
    PowerRequest,
    SessionRead,
    StepRead,
    StepWrite,
    TreeNodeRead,
    ValidationReportRead,
)

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title="CoffeeHelper")

# --- Machines & Guides ---

@app.get("/machines", response_model=List[MachineRead])
def list_machines(machines: MachineRepository = Depends(get_machine_repository)):
    return [MachineRead.model_validate(m) for m in machines.list_machines()]


@app.get("/guides", response_model=List[GuideRead])
def list_guides(
    search: Optional[str] = None,
    category: Optional[GuideCategory] = None,
    brand: Optional[str] = None,
    model: Optional[str] = None,
    guides: GuideRepository = Depends(get_guide_repository)
):
    """Lists guides; omitted filters mean 'All'."""
    guide_filter = GuideFilter(search=search, category=category, brand=brand, model=model)
    return [GuideRead.model_validate(g) for g in guides.list_guides(guide_filter)]


@app.get("/guides/{guide_id}", response_model=GuideRead)
def get_guide(guide_id: str, guides: GuideRepository = Depends(get_guide_repository)):
    guide = guides.lookup_guide(guide_id)
    if not guide:
        raise HTTPException(status_code=404, detail="Guide not found")
    return GuideRead.model_validate(guide)


# --- Troubleshooting steps (admin) ---
# Fixed paths first so they are not captured by /steps/{step_id}

@app.get("/steps/tree", response_model=TreeNodeRead)
def get_step_tree(
    root_id: Optional[str] = None,
    brand: Optional[str] = None,
    model: Optional[str] = None,
    store: StepRepository = Depends(get_step_repository),
    guides: GuideRepository = Depends(get_guide_repository)
):
    """
    Renders the troubleshooting tree from root_id (default: the entry point).
    Passing brand and model resolves Solution guides for that machine.
    """
    machine = MachineSelection(brand=brand, model=model) if brand and model else None
    tree = render(store, root_id or store.entry_point_id, guides, machine)
    return TreeNodeRead.from_domain(tree)


@app.get("/steps/validation", response_model=ValidationReportRead)
def validate_steps(
    store: StepRepository = Depends(get_step_repository),
    guides: GuideRepository = Depends(get_guide_repository)
):
    return ValidationReportRead.from_domain(validate(store, guides))


@app.get("/steps", response_model=List[StepRead])
def list_steps(
    search: Optional[str] = None,
    store: StepRepository = Depends(get_step_repository)
):
    steps = store.search(search) if search else store.list_all()
    return [StepRead.from_domain(s) for s in steps]


@app.get("/steps/{step_id}", response_model=StepRead)
def get_step(step_id: str, store: StepRepository = Depends(get_step_repository)):
    step = store.get(step_id)
    if not step:
        raise HTTPException(status_code=404, detail="Step not found")
    return StepRead.from_domain(step)


@app.post("/steps", response_model=StepRead, status_code=status.HTTP_201_CREATED)
def create_step(
    payload: StepWrite,
    store: StepRepository = Depends(get_step_repository)
):
    try:
        step = store.create(payload.to_domain())
    except StepAlreadyExists as e:
        raise HTTPException(status_code=409, detail=str(e))
    return StepRead.from_domain(step)


@app.put("/steps/{step_id}", response_model=StepRead)
def update_step(
    step_id: str,
    payload: StepWrite,
    store: StepRepository = Depends(get_step_repository)
):
    try:
        step = store.update(step_id, payload.to_domain())
    except StepNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ImmutableFieldViolation as e:
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "field": e.field},
        )
    return StepRead.from_domain(step)


@app.delete("/steps/{step_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_step(step_id: str, store: StepRepository = Depends(get_step_repository)):
    try:
        store.delete(step_id)
    except StepNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DependencyConflict as e:
        raise HTTPException(
            status_code=409,
            detail={"message": str(e), "referencing_ids": e.referencing_ids},
        )
    except ProtectedEntryPoint as e:
        raise HTTPException(status_code=409, detail={"message": str(e)})

    # For 204, we must explicitly return a Response object with no content
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Walkthrough sessions ---

def _session_read(turn: WalkthroughTurn, with_transition: bool = True) -> SessionRead:
    # Manually map the engine's view onto the public API shape.
    session, view = turn.session, turn.view
    return SessionRead(
        session_id=session.session_id,
        status=view.status.value,
        current_step_id=session.current_step_id,
        step=StepRead.from_domain(view.step) if view.step else None,
        guide=GuideRead.model_validate(view.guide) if view.guide else None,
        can_go_back=view.can_go_back,
        history=list(session.history),
        selected_machine=session.selected_machine,
        transition=turn.transition.name if with_transition else None,
        updated_at=session.updated_at,
    )


@app.post(
    "/sessions",
    response_model=CreateSessionResponse,
    status_code=status.HTTP_201_CREATED
)
def create_session(service: TroubleshootingService = Depends(get_troubleshooting_service)):
    """Starts a new walkthrough at the entry point."""
    session = service.create_session()
    return CreateSessionResponse(session_id=session.session_id)


@app.get("/sessions/{session_id}", response_model=SessionRead)
def get_session(
    session_id: str,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    try:
        return _session_read(service.view(session_id), with_transition=False)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


@app.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(
    session_id: str,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    if not service.delete_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.post("/sessions/{session_id}/answers", response_model=SessionRead)
def answer_question(
    session_id: str,
    answer: AnswerRequest,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    try:
        return _session_read(service.answer(session_id, answer.option_index))
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


@app.post("/sessions/{session_id}/back", response_model=SessionRead)
def go_back(
    session_id: str,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    try:
        return _session_read(service.back(session_id))
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


@app.post("/sessions/{session_id}/restart", response_model=SessionRead)
def restart_session(
    session_id: str,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    try:
        return _session_read(service.restart(session_id))
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


@app.put("/sessions/{session_id}/machine", response_model=SessionRead)
def select_machine(
    session_id: str,
    selection: MachineSelectRequest,
    service: TroubleshootingService = Depends(get_troubleshooting_service)
):
    try:
        return _session_read(service.select_machine(session_id, selection.machine_id))
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except MachineNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


# --- Guide assistant ---

@app.post("/assistant/messages", response_model=AssistantResponse)
async def ask_assistant(
    request: AssistantRequest,
    assistant: GuideAssistant = Depends(get_guide_assistant),
    guides: GuideRepository = Depends(get_guide_repository)
):
    try:
        reply = await assistant.reply(
            message=request.message,
            image_uri=request.image_uri,
            history=[Message(role=m.role, content=m.content) for m in request.history],
            machine=request.selected_machine,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return AssistantResponse(
        assistant_response=reply.assistant_response,
        suggested_guide_ids=reply.suggested_guide_ids,
        suggested_guides=[
            GuideRead.model_validate(guides.lookup_guide(guide_id))
            for guide_id in reply.suggested_guide_ids
        ],
    )


# --- Smart plugs ---

@app.get("/plugs/{device_id}", response_model=PlugStatusRead)
async def get_plug_status(
    device_id: str,
    plugs: SmartPlugProvider = Depends(get_smart_plug_provider)
):
    plug = await plugs.get_status(device_id)
    return PlugStatusRead(
        device_id=device_id,
        is_on=plug.is_on,
        on_time_seconds=plug.on_time_seconds,
        on_time_display=format_duration(plug.on_time_seconds),
        poll_interval_seconds=settings.SMART_PLUG_POLL_INTERVAL_SECONDS,
    )


@app.put("/plugs/{device_id}/power", status_code=status.HTTP_204_NO_CONTENT)
async def set_plug_power(
    device_id: str,
    power: PowerRequest,
    plugs: SmartPlugProvider = Depends(get_smart_plug_provider)
):
    await plugs.set_power(device_id, power.is_on)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
