# fintrack

A small library for keeping a list of financial transactions (incomes and
expenses), summarising them, filtering them and exporting them to CSV.

## Installation

```
pip install .
```

## Usage

```python
from datetime import date

from fintrack.transaction import Transaction, TransactionType
from fintrack.manager import TransactionManager

manager = TransactionManager()
manager.add(Transaction(TransactionType.INCOME, 1200.0, "Salary", date(2024, 6, 1), "Work"))
manager.add(Transaction(TransactionType.EXPENSE, 150.0, "Groceries", date(2024, 6, 3), "Food"))

len(manager)               # 2
manager.balance()          # 1050.0
manager.total_income()     # 1200.0
manager.total_expense()    # 150.0

manager.by_month(2024, 6)             # both transactions, in insertion order
manager.by_category("Food")           # the groceries
manager.by_amount_range(100.0, 500.0) # bounds are inclusive

manager.export_csv("transactions.csv")
removed = manager.remove(0)  # returns the removed transaction
```

### Transactions

`Transaction` is a frozen dataclass with the fields `type`
(a `TransactionType`, `INCOME` or `EXPENSE`), `amount`, `label`, `date` and
`category`. The date defaults to today and the category to an empty string.
Two properties help with totals: `is_income`, and `signed_amount`, which is
the amount made negative for expenses.

### The manager

`TransactionManager` keeps transactions in the order they were added.
Iterating over it yields them in that order, `len()` counts them and
`transactions()` returns them as a tuple. `clear()` removes them all.

`remove(index)` removes and returns the transaction at `index`; an index
outside the list, negative ones included, raises `IndexError`.

The filters `by_month(year, month)`, `by_category(category)` and
`by_amount_range(min_amount, max_amount)` return new lists and leave the
manager unchanged. Category matching is exact.

### CSV format

`export_csv(path)` writes a header line followed by one line per
transaction, in UTF-8, and raises `OSError` when the file cannot be written:

```
Type,Amount,Label,Date,Category
Income,1200,Salary,2024-06-01,Work
Expense,75.5,Fuel,2024-06-10,Transport
```

Amounts are written in their shortest general form (`1200`, `75.5`) and
dates as `YYYY-MM-DD`. Fields are not quoted, so labels and categories
should not contain commas or line breaks.

## What it does not do

fintrack is a library only: it has no command-line program and no window.
Transactions live in memory; there is no way to read a CSV file back or to
save them anywhere other than through `export_csv`.

## Running the tests

```
pip install .[test]
pytest
```