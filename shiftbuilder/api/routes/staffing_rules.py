from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from shiftbuilder.api.deps import get_db
from shiftbuilder.db.models.staffing import StaffingRules, StaffingTemplates
from shiftbuilder.schemas.staffing_rules import StaffingRuleCreate, StaffingRuleUpdate, StaffingRuleResponse

router = APIRouter(prefix="/staffing-rules", tags=["staffing-rules"])


@router.post("", response_model=StaffingRuleResponse, status_code=status.HTTP_201_CREATED)
def create_staffing_rule(
    payload: StaffingRuleCreate,
    db: Session = Depends(get_db),
):
    template = db.query(StaffingTemplates).filter(StaffingTemplates.id == payload.template_id).first()
    if not template:
        raise HTTPException(status_code=404, detail="Staffing template not found")

    data = payload.model_dump()
    data["role"] = payload.role.value
    rule = StaffingRules(**data)
    db.add(rule)
    db.commit()
    db.refresh(rule)
    return rule


@router.get("", response_model=List[StaffingRuleResponse])
def list_staffing_rules(
    template_id: Optional[int] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    query = db.query(StaffingRules)
    if template_id:
        query = query.filter(StaffingRules.template_id == template_id)

    return query.order_by(StaffingRules.start_time, StaffingRules.id).offset(skip).limit(limit).all()


@router.get("/{rule_id}", response_model=StaffingRuleResponse)
def get_staffing_rule(
    rule_id: int,
    db: Session = Depends(get_db),
):
    rule = db.query(StaffingRules).filter(StaffingRules.id == rule_id).first()
    if not rule:
        raise HTTPException(status_code=404, detail="Staffing rule not found")
    return rule


@router.put("/{rule_id}", response_model=StaffingRuleResponse)
def update_staffing_rule(
    rule_id: int,
    payload: StaffingRuleUpdate,
    db: Session = Depends(get_db),
):
    rule = db.query(StaffingRules).filter(StaffingRules.id == rule_id).first()
    if not rule:
        raise HTTPException(status_code=404, detail="Staffing rule not found")

    update_data = payload.model_dump(exclude_unset=True)
    if update_data.get("role") is not None:
        update_data["role"] = payload.role.value

    start = update_data.get("start_time", rule.start_time)
    end = update_data.get("end_time", rule.end_time)
    if start is None or end is None or end <= start:
        raise HTTPException(status_code=422, detail="end_time must be after start_time")

    for field, value in update_data.items():
        if value is not None:
            setattr(rule, field, value)

    db.commit()
    db.refresh(rule)
    return rule


@router.delete("/{rule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_staffing_rule(
    rule_id: int,
    db: Session = Depends(get_db),
):
    rule = db.query(StaffingRules).filter(StaffingRules.id == rule_id).first()
    if not rule:
        raise HTTPException(status_code=404, detail="Staffing rule not found")

    db.delete(rule)
    db.commit()
