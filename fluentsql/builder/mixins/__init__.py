"""Statement builder clause mixins."""

from fluentsql.builder.mixins._aggregate_functions import AggregateFunctionsMixin
from fluentsql.builder.mixins._delete_from import DeleteClauseMixin
from fluentsql.builder.mixins._expressions import DateFunctionsMixin, NumericFunctionsMixin, StringFunctionsMixin
from fluentsql.builder.mixins._from import FromClauseMixin
from fluentsql.builder.mixins._insert_values import InsertValuesMixin, ReplaceValuesMixin
from fluentsql.builder.mixins._join import JoinClauseMixin
from fluentsql.builder.mixins._limit_offset import LimitOffsetClauseMixin
from fluentsql.builder.mixins._order_by import GroupByClauseMixin, OrderByClauseMixin
from fluentsql.builder.mixins._select_columns import SelectColumnsMixin
from fluentsql.builder.mixins._update_set import UpdateSetClauseMixin
from fluentsql.builder.mixins._where import HavingClauseMixin, WhereClauseMixin

__all__ = (
    "AggregateFunctionsMixin",
    "DateFunctionsMixin",
    "DeleteClauseMixin",
    "FromClauseMixin",
    "GroupByClauseMixin",
    "HavingClauseMixin",
    "InsertValuesMixin",
    "JoinClauseMixin",
    "LimitOffsetClauseMixin",
    "NumericFunctionsMixin",
    "OrderByClauseMixin",
    "ReplaceValuesMixin",
    "SelectColumnsMixin",
    "StringFunctionsMixin",
    "UpdateSetClauseMixin",
    "WhereClauseMixin",
)
