from app.models.occasion import Occasion
from app.models.person import Person
from app.models.subgroup import Subgroup, SubgroupMember
from app.models.expense import Expense
from app.models.expense_split import ExpenseSplit
from app.models.settlement import Settlement

__all__ = [
    "Occasion",
    "Person",
    "Subgroup",
    "SubgroupMember",
    "Expense",
    "ExpenseSplit",
    "Settlement",
]
