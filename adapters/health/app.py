"""
Health registry demo: patients, prescriptions and a per-patient lookup.

Run with: python -m adapters.health.app
"""

from collections import defaultdict
from datetime import date, timedelta

from adapters.health.domain import Patient, Prescription
from core.config import DisplayConfig, get_config
from core.console import echo
from core.observability import configure_logging, logger
from core.services.repository import Repository


class HealthSystemApp:
    """Owns the patient and prescription repositories plus the grouped view."""

    def __init__(self, display: DisplayConfig | None = None, today: date | None = None) -> None:
        self.display = display or DisplayConfig()
        self.today = today or date.today()
        self.patients: Repository[Patient] = Repository("patients")
        self.prescriptions: Repository[Prescription] = Repository("prescriptions")
        self.prescription_map: dict[int, list[Prescription]] = {}
        self.logger = logger.bind(component="health_app")

    def seed_data(self) -> None:
        self.patients.add(Patient(id=1, name="Alice Smith", age=30, gender="F"))
        self.patients.add(Patient(id=2, name="Bob Jones", age=45, gender="M"))
        self.patients.add(Patient(id=3, name="Ama Mensah", age=27, gender="F"))

        seed = [
            (101, 1, "Amoxicillin", -2),
            (102, 1, "Ibuprofen", -1),
            (103, 2, "Lisinopril", -7),
            (104, 3, "Paracetamol", 0),
            (105, 2, "Metformin", -3),
        ]
        for rx_id, patient_id, medication, day_offset in seed:
            self.prescriptions.add(
                Prescription(
                    id=rx_id,
                    patient_id=patient_id,
                    medication_name=medication,
                    date_issued=self.today + timedelta(days=day_offset),
                )
            )
        self.logger.info(
            "health_data_seeded",
            patients=len(self.patients),
            prescriptions=len(self.prescriptions),
        )

    def build_prescription_map(self) -> dict[int, list[Prescription]]:
        """Group every prescription under its patient id, preserving insertion order."""
        grouped: defaultdict[int, list[Prescription]] = defaultdict(list)
        for prescription in self.prescriptions.get_all():
            grouped[prescription.patient_id].append(prescription)
        self.prescription_map = dict(grouped)
        return self.prescription_map

    def get_patient(self, patient_id: int) -> Patient | None:
        return self.patients.get_by_id(lambda p: p.id == patient_id)

    def get_prescriptions_by_patient_id(self, patient_id: int) -> list[Prescription]:
        return list(self.prescription_map.get(patient_id, []))

    def discharge_patient(self, patient_id: int) -> bool:
        """Remove a patient and their prescriptions; False if the patient is unknown."""
        if not self.patients.remove(lambda p: p.id == patient_id):
            self.logger.info("patient_not_found", patient_id=patient_id)
            return False
        while self.prescriptions.remove(lambda rx: rx.patient_id == patient_id):
            pass
        self.build_prescription_map()
        self.logger.info("patient_discharged", patient_id=patient_id)
        return True

    def print_all_patients(self) -> None:
        echo("-- Patients --")
        for patient in self.patients.get_all():
            echo(str(patient))

    def print_prescriptions_for_patient(self, patient_id: int) -> None:
        echo(f"-- Prescriptions for PatientID {patient_id} --")
        for prescription in self.get_prescriptions_by_patient_id(patient_id):
            echo(prescription.describe(self.display.date_format))

    def run(self) -> None:
        self.seed_data()
        self.build_prescription_map()
        self.print_all_patients()
        echo()
        self.print_prescriptions_for_patient(2)


def main() -> None:
    config = get_config()
    configure_logging(config.logging)
    HealthSystemApp(display=config.display).run()


if __name__ == "__main__":
    main()
