"""Example: compute one session's earnings through the service layer (no web app).

Goal: show that the calculator is a plain function the web layer calls before
it stores anything.
"""

from work_tracker.config.logging import configure_logging
from work_tracker.config.settings import load_settings
from work_tracker.earnings.calculator import EarningsCalculator
from work_tracker.earnings.factory import DeductionModelFactory
from work_tracker.earnings.formatting import format_currency, overtime_label
from work_tracker.earnings.model import WorkSession


def main():
    settings = load_settings()
    configure_logging(level=settings.log_level, log_json=settings.log_json)

    calculator = EarningsCalculator(DeductionModelFactory().for_mode(settings.deduction_mode))
    session = WorkSession(start_time="09:00", end_time="17:00", break_minutes=60, base_hourly_rate=25)
    b = calculator.calculate(session)

    print(f"{overtime_label(session.is_overtime, session.overtime_multiplier)}: {b.total_hours:.2f}h")
    print(f"gross {format_currency(b.gross_earnings)}")
    print(f"deductions {format_currency(b.total_deductions)}")
    print(f"net {format_currency(b.net_earnings)}")


if __name__ == "__main__":
    main()
