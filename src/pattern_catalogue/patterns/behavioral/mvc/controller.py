"""Controller - validates requests and routes every outcome through the view."""
from pattern_catalogue.domain.base.exceptions import ValidationError
from pattern_catalogue.infrastructure.logging.logger import get_logger
from pattern_catalogue.patterns.behavioral.mvc.model import UserModel
from pattern_catalogue.patterns.behavioral.mvc.views import UserView


class UserController:
    def __init__(self, model: UserModel, view: UserView):
        self._logger = get_logger(__name__)
        self.model = model
        self.view = view

    def set_view(self, view: UserView) -> None:
        self.view = view

    def add_user(self, user_id: int, name: str, email: str) -> bool:
        if not name or not email:
            self.view.show_error("Name and email cannot be empty")
            return False
        try:
            self.model.add(user_id, name, email)
        except ValidationError as e:
            self._logger.info(f"Rejected user {user_id}: {e}")
            self.view.show_error(str(e))
            return False
        self.view.show_message("User added successfully")
        return True

    def show_user(self, user_id: int) -> None:
        user = self.model.get(user_id)
        if user is None:
            self.view.show_not_found(user_id)
        else:
            self.view.show_user(user)

    def show_all_users(self) -> None:
        users = self.model.all()
        if not users:
            self.view.show_message("No users found")
        else:
            self.view.show_users(users)

    def remove_user(self, user_id: int) -> bool:
        if self.model.remove(user_id):
            self.view.show_message("User removed successfully")
            return True
        self.view.show_not_found(user_id)
        return False

    def show_user_count(self) -> None:
        self.view.show_message(f"Total users: {self.model.count()}")
