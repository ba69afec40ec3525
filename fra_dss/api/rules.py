"""Decision rule endpoints - CRUD and sample rules."""

from fastapi import APIRouter, HTTPException, status

from fra_dss.api.deps import RuleStoreDep
from fra_dss.engine.validation import InvalidRuleError
from fra_dss.samples import install_sample_rules
from fra_dss.schemas.rules import RuleCreate, RuleUpdate

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Decision rule not found")


@router.get("")
async def list_rules(store: RuleStoreDep, active_only: bool = False):
    """List decision rules, optionally only the active ones."""
    if active_only:
        rules = sorted(await store.get_active_rules(), key=lambda r: (r.priority, r.id))
    else:
        rules = await store.get_all_rules()
    return {"rules": rules}


@router.post("/sample")
async def create_sample_rules(store: RuleStoreDep):
    """Install the sample FRA rule library (existing names are skipped)."""
    created = await install_sample_rules(store)
    return {"message": "Sample decision rules created successfully", "created": len(created)}


@router.get("/{rule_id}")
async def get_rule(rule_id: int, store: RuleStoreDep):
    """Get a decision rule by ID."""
    rule = await store.get_rule_by_id(rule_id)
    if not rule:
        raise _not_found()
    return {"rule": rule}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_rule(body: RuleCreate, store: RuleStoreDep):
    """Create a decision rule."""
    try:
        rule = await store.create_rule(body)
    except InvalidRuleError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return {"rule": rule}


@router.put("/{rule_id}")
async def update_rule(rule_id: int, body: RuleUpdate, store: RuleStoreDep):
    """Update the supplied fields of a decision rule."""
    try:
        rule = await store.update_rule(rule_id, body)
    except InvalidRuleError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    if not rule:
        raise _not_found()
    return {"rule": rule}


@router.delete("/{rule_id}")
async def delete_rule(rule_id: int, store: RuleStoreDep):
    """Delete a decision rule."""
    if not await store.delete_rule(rule_id):
        raise _not_found()
    return {"message": "Decision rule deleted successfully"}
