class HabitNotFound(Exception):
    def __init__(self, habit_id: str):
        super().__init__(f"Habit {habit_id} not found")
        self.habit_id = habit_id

class ItemNotFound(Exception):
    def __init__(self, item_id: str):
        super().__init__(f"Item {item_id} not found")
        self.item_id = item_id

class ThemeNotOwned(Exception):
    pass
