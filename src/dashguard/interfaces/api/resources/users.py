"""User administration resources."""

import falcon
import falcon.asgi

from dashguard.application.dto.user_dto import UserAccessUpdate, UserCreateInput
from dashguard.application.use_cases.user.create_user import CreateUserUseCase
from dashguard.application.use_cases.user.delete_user import DeleteUserUseCase
from dashguard.application.use_cases.user.list_users import ListUsersUseCase
from dashguard.application.use_cases.user.update_user_access import UpdateUserAccessUseCase
from dashguard.domain.exceptions import NotFound, PermissionDenied, ValidationError
from dashguard.interfaces.api.hooks import require_admin


async def _json_object(req: falcon.asgi.Request) -> dict:
    body = await req.get_media()
    if not isinstance(body, dict):
        raise falcon.HTTPBadRequest(description="Request body must be a JSON object")
    return body


class UsersResource:
    """GET /v1/users - list managed users. POST /v1/users - create one."""

    def __init__(self, list_users: ListUsersUseCase, create_user: CreateUserUseCase) -> None:
        self._list = list_users
        self._create = create_user

    @falcon.before(require_admin())
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            users = await self._list.execute(req.context.user)
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return

        resp.media = {"users": [u.to_record() for u in users]}
        resp.status = falcon.HTTP_200

    @falcon.before(require_admin())
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = await _json_object(req)
        try:
            data = UserCreateInput(
                username=body["username"],
                first_name=body.get("first_name"),
                last_name=body.get("last_name"),
                role=body.get("role"),
                is_admin=body.get("is_admin") is True,
                permissions=body.get("permissions"),
            )
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        try:
            user = await self._create.execute(req.context.user, data)
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {"user": user.to_record()}
        resp.status = falcon.HTTP_201


class UserPermissionsResource:
    """PUT /v1/users/{user_id}/permissions - change role, active flag and access."""

    def __init__(self, update_user_access: UpdateUserAccessUseCase) -> None:
        self._update = update_user_access

    @falcon.before(require_admin())
    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        body = await _json_object(req)
        try:
            user = await self._update.execute(
                req.context.user, user_id, UserAccessUpdate.from_body(body)
            )
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "User not found"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "message": "User permissions updated successfully",
            "user": user.to_record(),
        }
        resp.status = falcon.HTTP_200


class UserResource:
    """DELETE /v1/users/{user_id} - remove a managed user."""

    def __init__(self, delete_user: DeleteUserUseCase) -> None:
        self._delete = delete_user

    @falcon.before(require_admin())
    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        try:
            await self._delete.execute(req.context.user, user_id)
        except PermissionDenied as e:
            resp.status = falcon.HTTP_403
            resp.media = {"error": str(e)}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "User not found"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {"message": "User deleted successfully"}
        resp.status = falcon.HTTP_200
