"""CSV export of mix calculations."""

import csv
import io

from mashkanta.models.results import MixCalculation, TrackCalculation

TRACK_HEADERS = ["מסלול", "סוג", "סכום", "ריבית", "תקופה", "תשלום חודשי", "סך הריבית"]
SCHEDULE_HEADERS = ["חודש", "יתרת פתיחה", "תשלום", "ריבית", "קרן", "יתרת סגירה"]


def tracks_csv(calc: MixCalculation) -> str:
    """One line per track: name, type label, amount, rate, years, payment, interest."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(TRACK_HEADERS)
    for tc in calc.track_calculations:
        t = tc.track
        writer.writerow([
            t.name,
            t.label,
            str(t.amount),
            str(t.interest_rate),
            t.years,
            f"{tc.monthly_payment:.2f}",
            f"{tc.total_interest:.2f}",
        ])
    return buf.getvalue()


def schedule_csv(track_calc: TrackCalculation) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(SCHEDULE_HEADERS)
    for row in track_calc.schedule:
        writer.writerow([
            row.month,
            f"{row.balance_start:.2f}",
            f"{row.payment:.2f}",
            f"{row.interest:.2f}",
            f"{row.principal:.2f}",
            f"{row.balance_end:.2f}",
        ])
    return buf.getvalue()
