"""Month-by-month amortization schedule for a reducing-balance loan"""

from typing import List

from finserv_calculators.domain.emi import compute_emi, monthly_rate
from finserv_calculators.domain.models import AmortizationRow


def generate_amortization_schedule(
    principal: float,
    annual_rate_percent: float,
    tenure_months: int,
) -> List[AmortizationRow]:
    """
    Break a loan into monthly interest/principal splits.

    Unlike the closed-form calculators this walks every month, so cost is O(n)
    in the tenure.

    Requirements:
    - Every installment is the rounded EMI until the balance is cleared
    - Each row's payment is exactly its interest plus principal
    - Last installment absorbs rounding drift so the loan closes at exactly 0
    - Interest and principal are reported to the paisa

    Example:
        120000 at 0% over 12 months -> 12 rows of 10000 principal, 0 interest
    """
    emi = compute_emi(principal, annual_rate_percent, tenure_months)
    rate = monthly_rate(annual_rate_percent)

    balance = float(principal)
    rows = []
    for month in range(1, tenure_months + 1):
        interest = round(balance * rate, 2)

        if month == tenure_months:
            # Final installment clears whatever is left, up or down
            principal_paid = round(balance, 2)
        else:
            # Loan may close early on a tiny principal; later rows then carry nothing
            principal_paid = round(min(emi - interest, balance), 2)

        payment = principal_paid + interest
        balance = round(balance - principal_paid, 2)

        rows.append(
            AmortizationRow(
                month=month,
                payment=round(payment, 2),
                interest=interest,
                principal=principal_paid,
                closing_balance=balance,
            )
        )

    return rows
