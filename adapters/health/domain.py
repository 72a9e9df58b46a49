"""Patient registry domain models."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class Patient(BaseModel):
    """Registered patient."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(min_length=1)
    age: int = Field(ge=0)
    gender: str

    def __str__(self) -> str:
        return f"#{self.id} {self.name}, {self.age}, {self.gender}"


class Prescription(BaseModel):
    """Medication issued to a patient on a given day."""

    model_config = ConfigDict(frozen=True)

    id: int
    patient_id: int
    medication_name: str = Field(min_length=1)
    date_issued: dt.date

    def describe(self, date_format: str = "%d/%m/%Y") -> str:
        return (
            f"Rx#{self.id} Patient:{self.patient_id} {self.medication_name} "
            f"({self.date_issued.strftime(date_format)})"
        )

    def __str__(self) -> str:
        return self.describe()
