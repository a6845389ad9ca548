from fastapi import APIRouter, Depends
from typing import List
from checkin_app.core.dependencies import get_friend_graph, get_friendship_state_machine
from checkin_app.schemas.friend import FriendshipCreate, FriendshipUpdate, FriendshipResponse, FriendshipRemoved
from checkin_app.schemas.user import FriendResponse
from checkin_app.services import FriendGraphResolver, FriendshipStateMachine

router = APIRouter()

@router.get("/friends/{user_id}", response_model=List[FriendResponse])
def get_user_friends(
    user_id: int,
    resolver: FriendGraphResolver = Depends(get_friend_graph)
):
    """
    Get all accepted friends of a user, whichever side sent the request
    """
    return resolver.friends_of(user_id)

@router.get("/friends/{user_id}/requests", response_model=List[FriendshipResponse])
def get_friendship_requests(
    user_id: int,
    machine: FriendshipStateMachine = Depends(get_friendship_state_machine)
):
    """
    Get pending friend requests received by a user
    """
    return machine.pending_requests_for(user_id)

@router.post("/friendships", response_model=FriendshipResponse, status_code=201)
def create_friendship(
    request: FriendshipCreate,
    machine: FriendshipStateMachine = Depends(get_friendship_state_machine)
):
    """
    Send a friend request
    """
    return machine.create(request.requester_id, request.addressee_id)

@router.put("/friendships/{friendship_id}", response_model=FriendshipResponse)
def update_friendship(
    friendship_id: int,
    update: FriendshipUpdate,
    machine: FriendshipStateMachine = Depends(get_friendship_state_machine)
):
    """
    Update friendship status (accept/reject/block)
    """
    return machine.update(friendship_id, update.status)

@router.delete("/friendships/{friendship_id}", response_model=FriendshipRemoved)
def remove_friendship(
    friendship_id: int,
    machine: FriendshipStateMachine = Depends(get_friendship_state_machine)
):
    """
    Remove a friendship edge in any status
    """
    return {"removed": machine.remove(friendship_id)}
