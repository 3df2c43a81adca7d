"""
Print a doctor's slots for one day.

Loads the mock clinic, optionally blocks a time range first, and prints every
slot with its booked/blocked state. Useful for checking working-hours
configuration and block ranges without a front end.

Usage:
    python scripts/show_daily_schedule.py --date 2026-01-09
    python scripts/show_daily_schedule.py --date 2026-01-09 --block 12:00 13:00 --reason Lunch
    python scripts/show_daily_schedule.py --date 2026-01-09 --json
"""
import argparse
import json
import os
import sys

# Add the src directory to sys.path to allow imports when run from a checkout
sys.path.append(os.path.join(os.path.dirname(__file__), '../src'))

from core.config import DEFAULT_DOCTOR_ID
from main import configure_logging, create_context


def main():
    parser = argparse.ArgumentParser(description="Show a doctor's daily schedule")
    parser.add_argument("--date", required=True, help="Date in YYYY-MM-DD format")
    parser.add_argument("--doctor", default=DEFAULT_DOCTOR_ID, help="Doctor ID")
    parser.add_argument("--block", nargs=2, metavar=("START", "END"), help="Block START-END (HH:MM) first")
    parser.add_argument("--reason", default=None, help="Reason stored on blocked slots")
    parser.add_argument("--json", action="store_true", help="Print the availability record as JSON")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    args = parser.parse_args()

    configure_logging(args.log_level)
    context = create_context()

    doctor = context.get_doctor(args.doctor)
    if not doctor:
        print(f"Doctor '{args.doctor}' not found.")
        sys.exit(1)

    if args.block:
        context.block_time_slot(args.doctor, args.date, args.block[0], args.block[1], args.reason)

    availability = context.get_doctor_availability(args.doctor, args.date)
    if args.json:
        print(json.dumps(availability.to_dict(), indent=2))
        return

    appointments = {a.id: a for a in context.appointments_for_day(args.doctor, args.date)}

    print(f"\n=== {doctor.name} ({doctor.id}) on {args.date} ===")
    print(f"Working hours: {doctor.working_hours.start}-{doctor.working_hours.end}, "
          f"{doctor.working_hours.slot_duration} min slots")

    for slot in availability.time_slots:
        state = []
        if slot.is_booked:
            appointment = appointments.get(slot.appointment_id)
            who = appointment.patient_name if appointment else slot.appointment_id
            state.append(f"BOOKED ({who})")
        if slot.is_blocked:
            state.append(f"BLOCKED ({slot.block_reason})" if slot.block_reason else "BLOCKED")
        print(f"  {slot.start_time}-{slot.end_time}  {' '.join(state) if state else 'free'}")

    available = context.get_available_time_slots(args.doctor, args.date)
    print(f"\nAvailable slots: {len(available)} of {len(availability.time_slots)}")


if __name__ == "__main__":
    main()
