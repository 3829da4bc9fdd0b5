# 사용자 라우터
# - 회원가입: POST /users
# - 내 정보: GET /users/me (인증 필요)
# - 로그인: POST /users/login
# - 로그아웃: DELETE /users/me/token (인증 필요)
# 회원가입/로그인은 발급한 토큰을 x-auth 응답 헤더로 돌려줍니다.

from fastapi import APIRouter, Depends, Response

from ..core.security import AUTH_HEADER
from ..schemas.user_schema import UserCreate, UserLogin, UserPublic
from ..services.auth_service import AuthService, get_auth_service
from .deps import AuthContext, authenticate

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserPublic, summary="회원가입 (이메일 중복 체크 포함)")
async def register(payload: UserCreate, response: Response, service: AuthService = Depends(get_auth_service)):
    user, token = await service.register(payload.email, payload.password)
    response.headers[AUTH_HEADER] = token
    return UserPublic.from_document(user)


@router.get("/me", response_model=UserPublic, summary="현재 로그인한 사용자")
async def read_me(auth: AuthContext = Depends(authenticate)):
    return UserPublic.from_document(auth.user)


@router.post("/login", response_model=UserPublic, summary="로그인 (x-auth 토큰 발급)")
async def login(payload: UserLogin, response: Response, service: AuthService = Depends(get_auth_service)):
    user, token = await service.login(payload.email, payload.password)
    response.headers[AUTH_HEADER] = token
    return UserPublic.from_document(user)


@router.delete("/me/token", summary="로그아웃 (현재 토큰 폐기)")
async def logout(auth: AuthContext = Depends(authenticate), service: AuthService = Depends(get_auth_service)):
    await service.logout(auth.user, auth.token)
    return Response(status_code=200)
