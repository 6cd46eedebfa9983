from .goal import Goal, GoalCategory, GoalStatus, GoalTab, ALL_CATEGORIES

__all__ = [
    'Goal',
    'GoalCategory',
    'GoalStatus',
    'GoalTab',
    'ALL_CATEGORIES'
]
