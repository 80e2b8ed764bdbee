from __future__ import annotations

from datetime import date

from ..common.datetime_utils import today_iso
from ..core.constants import EMPLOYEES_KEY, PRIMARY_OWNER_EMPLOYEE_ID, PRIMARY_OWNER_USER_ID
from ..core.enums import DeductionType, EmployeeStatus
from ..storage.collection import StoredCollection
from ..storage.port import KeyValueStore
from .model import Deduction, Employee


def primary_owner_employee(today: date | None = None) -> Employee:
    """The reserved placeholder every fresh roster starts with."""
    return Employee(
        id=PRIMARY_OWNER_EMPLOYEE_ID,
        name="General Manager",
        position="Owner",
        base_salary=0,
        net_salary=0,
        status=EmployeeStatus.ACTIVE,
        join_date=today_iso(today),
        linked_user_id=PRIMARY_OWNER_USER_ID,
    )


def deduction_to_doc(d: Deduction) -> dict:
    return {"id": d.id, "date": d.date, "amount": d.amount, "type": d.type.value, "reason": d.reason}


def deduction_from_doc(doc: dict) -> Deduction:
    return Deduction(
        id=str(doc["id"]),
        date=doc.get("date", ""),
        amount=doc.get("amount", 0),
        type=DeductionType(doc["type"]),
        reason=doc.get("reason", ""),
    )


def employee_to_doc(emp: Employee) -> dict:
    doc = {
        "id": emp.id,
        "name": emp.name,
        "position": emp.position,
        "baseSalary": emp.base_salary,
        "netSalary": emp.net_salary,
        "status": emp.status.value,
        "joinDate": emp.join_date,
        "deductions": [deduction_to_doc(d) for d in emp.deductions],
    }
    if emp.linked_user_id:
        doc["linkedUserId"] = emp.linked_user_id
    return doc


def employee_from_doc(doc: dict) -> Employee:
    return Employee(
        id=str(doc["id"]),
        name=doc["name"],
        position=doc.get("position", ""),
        base_salary=doc.get("baseSalary", 0),
        net_salary=doc.get("netSalary", 0),
        status=EmployeeStatus(doc.get("status", EmployeeStatus.ACTIVE.value)),
        join_date=doc.get("joinDate", ""),
        deductions=tuple(deduction_from_doc(d) for d in doc.get("deductions") or ()),
        linked_user_id=doc.get("linkedUserId") or None,
    )


class StoreEmployeeRepository(StoredCollection[Employee]):
    def __init__(self, store: KeyValueStore):
        super().__init__(
            store,
            EMPLOYEES_KEY,
            to_doc=employee_to_doc,
            from_doc=employee_from_doc,
            default=lambda: (primary_owner_employee(),),
        )
