"""
CSV Parser for Bank Exports

Reads UK bank CSV exports into plain transaction dicts for import.
Supported presets: generic, chase-uk, natwest, nationwide, tesco, trading212, ynab.
"""
import csv
import hashlib
import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Callable, Dict, List, Optional, Set, Tuple


RowTransform = Callable[[Dict[str, str]], Tuple[str, str]]


@dataclass(frozen=True)
class CsvPreset:
    """Column layout of one bank's CSV export"""
    name: str
    display_name: str
    date_column: str
    payee_column: str
    date_formats: Tuple[str, ...]
    amount_column: Optional[str] = None
    inflow_column: Optional[str] = None  # split in/out columns (no signed amount)
    outflow_column: Optional[str] = None
    description_column: Optional[str] = None
    row_transform: Optional[RowTransform] = None  # row -> (payee, description)

    def required_columns(self) -> Set[str]:
        columns = {self.date_column, self.payee_column}
        for column in (self.amount_column, self.inflow_column, self.outflow_column):
            if column:
                columns.add(column)
        return columns


# Nationwide puts the payment method and the payee in one Description field
_CONTACTLESS = re.compile(r'Contactless Payment\s+(.+?)\s+(GB|UK|[A-Z]{2})\s')
_DIRECT_DEBIT = re.compile(r'Direct Debit.*?([A-Z\s]+)$')


def nationwide_payee(description: str) -> str:
    """
    Pull the payee out of a Nationwide description.

    Examples:
        "Contactless Payment PRET A MANGER LONDON GB APPLEPAY" -> "PRET A MANGER LONDON"
        "Payment to J SMITH" -> "J SMITH"
        "Direct Debit - Council Tax LONDON BOROUGH" -> "LONDON BOROUGH"
    """
    payee = description
    if 'Contactless Payment' in payee:
        match = _CONTACTLESS.search(payee)
        if match:
            payee = match.group(1)
    elif 'Payment to' in payee:
        payee = payee.replace('Payment to', '', 1)
    elif 'Direct Debit' in payee:
        match = _DIRECT_DEBIT.search(payee)
        if match:
            payee = match.group(1)
    elif 'Bank credit' in payee:
        payee = payee.replace('Bank credit', '', 1)
    elif 'Transfer from' in payee:
        payee = payee.replace('Transfer from', '', 1)
    return payee.strip()


def _nationwide_row(row: Dict[str, str]) -> Tuple[str, str]:
    description = (row.get('Description') or '').strip()
    return nationwide_payee(description), description


# Trading 212 rows without a merchant are account events named by Action
TRADING212_ACTION_PAYEES = {
    'Interest on cash': 'Trading 212 Interest',
    'Spending cashback': 'Trading 212 Cashback',
    'Withdrawal': 'Bank Transfer (Out)',
    'Card credit': 'Trading 212 Refund',
    'Dividend adjustment': 'Trading 212 Dividend',
}

_CARD_PROCESSOR_PREFIX = re.compile(r'^(CRV|000)\*')


def _trading212_row(row: Dict[str, str]) -> Tuple[str, str]:
    action = row.get('Action') or ''
    notes = row.get('Notes') or ''
    merchant = row.get('Merchant name') or ''

    if merchant.strip():
        payee = _CARD_PROCESSOR_PREFIX.sub('', merchant).strip()
    elif action == 'Deposit':
        payee = 'Bank Transfer (In)' if 'Bank Transfer' in notes else 'Trading 212 Deposit'
    else:
        payee = TRADING212_ACTION_PAYEES.get(action, f'Trading 212 {action}'.strip())

    description = action
    if notes and notes != action:
        description += f' - {notes}'
    if merchant and row.get('Merchant category'):
        description += f" ({row['Merchant category']})"

    return payee or 'Trading 212', description.strip()


PRESETS: Dict[str, CsvPreset] = {
    'generic': CsvPreset(
        name='generic',
        display_name='Generic CSV',
        date_column='Date',
        payee_column='Payee',
        amount_column='Amount',
        description_column='Description',
        date_formats=('%Y-%m-%d', '%d/%m/%Y'),
    ),
    'chase-uk': CsvPreset(
        name='chase-uk',
        display_name='Chase UK',
        date_column='Transaction date',
        payee_column='Description',
        amount_column='Amount',
        date_formats=('%Y-%m-%d',),
    ),
    'natwest': CsvPreset(
        name='natwest',
        display_name='NatWest',
        date_column='Date',
        payee_column='Description',
        amount_column='Value',
        date_formats=('%d/%m/%Y',),
    ),
    'nationwide': CsvPreset(
        name='nationwide',
        display_name='Nationwide Building Society',
        date_column='Date',
        payee_column='Description',
        inflow_column='Paid in',
        outflow_column='Paid out',
        date_formats=('%d %b %Y', '%d/%m/%Y'),
        row_transform=_nationwide_row,
    ),
    'tesco': CsvPreset(
        name='tesco',
        display_name='Tesco Bank',
        date_column='Date',
        payee_column='Description',
        amount_column='Amount',
        date_formats=('%d/%m/%Y',),
    ),
    'trading212': CsvPreset(
        name='trading212',
        display_name='Trading 212',
        date_column='Time',
        payee_column='Merchant name',
        amount_column='Total',
        # Time carries a clock part, sometimes with milliseconds; only the date is kept
        date_formats=('%Y-%m-%d %H:%M:%S.%f', '%Y-%m-%d %H:%M:%S', '%Y-%m-%d'),
        row_transform=_trading212_row,
    ),
    'ynab': CsvPreset(
        name='ynab',
        display_name='YNAB (You Need A Budget)',
        date_column='Date',
        payee_column='Payee',
        inflow_column='Inflow',
        outflow_column='Outflow',
        description_column='Memo',
        date_formats=('%m/%d/%Y',),
    ),
}


def compute_row_hash(txn_date: str, payee: str, amount: Decimal, row_index: int) -> str:
    """
    SHA256 of the key fields plus row position, for deduplication.
    Row position keeps identical same-day purchases apart.
    """
    hash_input = f"{txn_date}|{payee}|{amount}|{row_index}"
    return hashlib.sha256(hash_input.encode()).hexdigest()


def parse_date(date_str: str, formats: Tuple[str, ...]) -> str:
    """Parse date string to YYYY-MM-DD format"""
    date_str = (date_str or '').strip()
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).strftime('%Y-%m-%d')
        except ValueError:
            continue

    raise ValueError(f"Could not parse date: {date_str!r}")


def parse_amount(amount_str: Optional[str]) -> Decimal:
    """Parse an amount like '£1,234.56' or '-12.00' to Decimal"""
    if not amount_str or not amount_str.strip():
        return Decimal('0.00')

    # Remove currency symbols, commas
    cleaned = re.sub(r'[^0-9.\-]', '', amount_str)
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount: {amount_str!r}")


def _row_amount(row: Dict[str, str], preset: CsvPreset) -> Decimal:
    if preset.amount_column:
        return parse_amount(row.get(preset.amount_column))

    paid_in = parse_amount(row.get(preset.inflow_column or ''))
    paid_out = parse_amount(row.get(preset.outflow_column or ''))
    return paid_in if paid_in > 0 else -abs(paid_out)


def parse_bank_csv(csv_path: Path, preset_name: str = 'generic') -> List[Dict]:
    """
    Parse a bank CSV export.

    Args:
        csv_path: Path to CSV file
        preset_name: Key into PRESETS

    Returns:
        List of transaction dicts (negative amount = money spent)
    """
    if preset_name not in PRESETS:
        raise ValueError(f"Unknown CSV preset: {preset_name} (choose from {', '.join(PRESETS)})")
    preset = PRESETS[preset_name]

    transactions = []

    with open(csv_path, 'r', encoding='utf-8-sig', newline='') as f:
        reader = csv.DictReader(f)

        missing = preset.required_columns() - set(reader.fieldnames or [])
        if missing:
            raise ValueError(f"{csv_path.name} is missing columns for {preset.display_name}: {sorted(missing)}")

        for i, row in enumerate(reader):
            try:
                txn_date = parse_date(row[preset.date_column], preset.date_formats)
                amount = _row_amount(row, preset)
            except ValueError as e:
                raise ValueError(f"Row {i + 2}: {e}") from e

            if preset.row_transform:
                payee, description = preset.row_transform(row)
            else:
                payee = row.get(preset.payee_column) or ''
                description = ''
                if preset.description_column:
                    description = (row.get(preset.description_column) or '').strip()
            payee = payee.strip() or 'Unknown'

            transactions.append({
                'txn_date': txn_date,
                'payee': payee,
                'description': description or payee,
                'amount': amount,
                'type': 'income' if amount > 0 else 'payment',
                'source': preset.name,
                'source_row_hash': compute_row_hash(txn_date, payee, amount, i),
            })

    return transactions
