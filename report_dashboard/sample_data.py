"""
Sample report rows shown when a report has no data for the chosen date.

Rows are flat (linked by parent id) exactly like query results, with fresh
uuid4 ids on every call.
"""
import uuid

SAMPLE_ORG = "Маркова-Дорей Ю.В. ИП"
SAMPLE_ORG_2 = 'ООО "ОРТОБУМ"'


def _id():
    return str(uuid.uuid4())


def cash_bank_rows(organization_name=SAMPLE_ORG):
    total, org1, org2 = _id(), _id(), _id()

    def row(id_, parent, name, org, amount, kind, level, total_row=False):
        return {
            "id": id_, "parent_id": parent, "organization_name": org,
            "account_name": name, "balance_start": amount, "income_amount": 0,
            "expense_amount": 0, "balance_current": amount, "account_type": kind,
            "level": level, "is_total_row": total_row,
        }

    return [
        row(total, None, "Итого", organization_name, 7413741, "total", 0, True),
        row(org1, total, organization_name, organization_name, 4717137, "organization", 1),
        row(_id(), org1, "Альфа-банк", organization_name, 63882, "bank", 2),
        row(_id(), org1, "НБД", organization_name, 275308, "bank", 2),
        row(_id(), org1, "Сбербанк", organization_name, 4248450, "bank", 2),
        row(org2, total, SAMPLE_ORG_2, SAMPLE_ORG_2, 2696604, "organization", 1),
        row(_id(), org2, "Альфа-банк", SAMPLE_ORG_2, 1767627, "bank", 2),
        row(_id(), org2, "Сбербанк 8301", SAMPLE_ORG_2, 851443, "bank", 2),
        row(_id(), org2, "ЮникредитБанк", SAMPLE_ORG_2, 52275, "bank", 2),
    ]


def debt_rows(organization_name=SAMPLE_ORG):
    total, org1, buyers, suppliers = _id(), _id(), _id(), _id()

    def row(id_, parent, name, debt, overdue, credit, kind, level, total_row=False):
        return {
            "id": id_, "parent_client_id": parent, "client_name": name,
            "organization_name": organization_name, "debt_amount": debt,
            "overdue_amount": overdue, "credit_amount": credit,
            "organization_type": kind, "level": level,
            "is_total_row": total_row, "is_group_row": False,
        }

    return [
        row(total, None, "Итого", 4703875, 0, 12601353, "total", 0, True),
        row(org1, total, organization_name, 4703875, 0, 12601353, "contractor", 1),
        row(buyers, org1, "ПОКУПАТЕЛИ (сч. 62)", 1788890, 0, 1047299, "buyer", 2),
        row(_id(), buyers, "Физическое лицо", 1403000, 0, 0, "buyer", 3),
        row(_id(), buyers, "ЦПО ООО", 267650, 0, 0, "buyer", 3),
        row(suppliers, org1, "ПОСТАВЩИКИ (сч. 60)", 2990937, 0, 10685669, "supplier", 2),
        row(_id(), suppliers, "Сатурн ООО Аренда", 372240, 0, 0, "supplier", 3),
        row(_id(), suppliers, "ИНВЕСТ НЕДВИЖИМОСТЬ ООО", 224624, 0, 0, "supplier", 3),
    ]


def inventory_turnover_rows(organization_name=SAMPLE_ORG_2):
    total, org, own, commission = _id(), _id(), _id(), _id()

    def row(id_, parent, name, qty, bal, d_month, p_month, days, level, total_row=False):
        return {
            "id": id_, "parent_category_id": parent, "category_name": name,
            "organization_name": organization_name, "quantity_pairs": qty,
            "balance_rub": bal, "dynamics_start_month_rub": d_month,
            "dynamics_start_month_percent": p_month,
            "dynamics_start_year_rub": d_month, "dynamics_start_year_percent": p_month,
            "turnover_days": days, "level": level, "is_total_row": total_row,
        }

    return [
        row(total, None, "Итого", 83166, 92704559, 3527755, 13.0, 96, 0, True),
        row(org, total, organization_name, 83166, 92704559, 3527755, 23.5, 198, 1),
        row(own, org, "Обувь на собственных складах", 42645, 22871516, -336938, 47.6, 536, 2),
        row(_id(), own, "Ботинки женские", 416, 1015442, -44429, -4.2, 0, 3),
        row(commission, org, "Обувь на складах комиссионеров", 40521, 69833043, 3864693, 5.4, 121, 2),
        row(_id(), commission, "РВБ ООО", 13159, 22268438, 198757, 0.8, 84, 3),
        row(_id(), commission, "ИНТЕРНЕТ РЕШЕНИЯ ООО", 11029, 19040822, 3659411, 21.1, 82, 3),
        row(_id(), commission, "КУПИШУЗ ООО", 1774, 3052024, -948728, -29.5, 170, 3),
    ]


def inventory_balance_rows(organization_name=SAMPLE_ORG):
    total, org1, org2, goods = _id(), _id(), _id(), _id()

    def row(id_, parent, name, org, qty, bal, d_month, p_month, d_year, p_year, level,
            total_row=False):
        return {
            "id": id_, "parent_category_id": parent, "category_name": name,
            "organization_name": org, "quantity_pairs": qty, "balance_rub": bal,
            "dynamics_start_month_rub": d_month, "dynamics_start_month_percent": p_month,
            "dynamics_start_year_rub": d_year, "dynamics_start_year_percent": p_year,
            "level": level, "is_total_row": total_row,
        }

    o1, o2 = organization_name, SAMPLE_ORG_2
    return [
        row(total, None, "Итого", o1, 163954, 197635082, -11034533, -5.29, 27880832, 16.42, 0, True),
        row(org1, total, o1, o1, 56817, 49112903, 644672, 1.33, -185373, -0.38, 1),
        row(_id(), org1, "Материалы", o1, 10860, 412966, -22406, -5.15, 40547, 10.89, 2),
        row(_id(), org1, "Прочие материалы", o1, 6500, 166018, 25868, 18.46, 31503, 23.42, 2),
        row(_id(), org1, "Товары в розничной торговле (по покупной стоимости)", o1,
            45769, 47996251, 168677, 0.35, -929606, -1.90, 2),
        row(org2, total, o2, o2, 107137, 148522179, -11679205, -7.29, 28066205, 23.30, 1),
        row(_id(), org2, "Материалы", o2, 3142, 1203104, -39922, -3.21, 91665, 8.19, 2),
        row(goods, org2, "Товары на складах", o2, 58327, 58719816, -9814594, -14.32, 8426396, 16.75, 2),
        row(_id(), goods, "Комплектующие", o2, 1, 282, 0, 0, 0, 0, 3),
        row(_id(), goods, "Материалы", o2, 12101, 249, 0, 0, 0, 0, 3),
    ]


def plan_fact_rows(organization_name=SAMPLE_ORG):
    total, retail, wholesale = _id(), _id(), _id()

    def row(id_, parent, name, plan, fact, level, total_row=False):
        return {
            "id": id_, "parent_id": parent, "category_name": name,
            "organization_name": organization_name, "plan_amount": plan,
            "fact_amount": fact,
            "execution_percent": round(fact / plan * 100, 1) if plan else 0.0,
            "period_type": "month", "level": level, "is_total_row": total_row,
            "is_expandable": level < 2,
        }

    return [
        row(total, None, "Итого", 25000000, 17975000, 0, True),
        row(retail, total, "Розница", 15000000, 11250000, 1),
        row(_id(), retail, "Интернет-магазин", 6000000, 5100000, 2),
        row(_id(), retail, "Салоны", 9000000, 6150000, 2),
        row(wholesale, total, "Опт", 10000000, 6725000, 1),
    ]


SAMPLES = {
    "cash_bank": cash_bank_rows,
    "debt": debt_rows,
    "inventory_turnover": inventory_turnover_rows,
    "inventory_balance": inventory_balance_rows,
    "plan_fact": plan_fact_rows,
}


def sample_rows(report_type):
    return SAMPLES[report_type]()
