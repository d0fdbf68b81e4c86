from uuid import UUID

from sqlalchemy import or_
from sqlmodel import Session, col, select

from sharecircle.core.enums import FriendStatus, Relationship
from sharecircle.models.friendship import FriendEdge, canonical_pair
from sharecircle.models.profile import Profile


def get_edge_between(
    *,
    session: Session,
    user_id: UUID,
    other_id: UUID,
) -> FriendEdge | None:
    """
    Get the edge connecting two users, whichever of them sent the request.

    Parameters:
        session (Session): The database session.
        user_id (UUID): One side of the pair.
        other_id (UUID): The other side of the pair.
    Returns:
        FriendEdge | None: The edge if any, otherwise None.
    """
    user_low_id, user_high_id = canonical_pair(user_id, other_id)
    return session.exec(
        select(FriendEdge).where(
            FriendEdge.user_low_id == user_low_id,
            FriendEdge.user_high_id == user_high_id,
        )
    ).one_or_none()


def create_friend_request(
    *,
    session: Session,
    requester_id: UUID,
    recipient_id: UUID,
) -> FriendEdge:
    """
    Create a pending friend request from one user to another.

    Parameters:
        session (Session): The database session.
        requester_id (UUID): The ID of the user sending the request.
        recipient_id (UUID): The ID of the user receiving the request.
    Returns:
        FriendEdge: The created pending edge.
    Raises:
        IntegrityError: If an edge already exists for the pair, in either
            direction, or if either user does not exist.
    """
    edge = FriendEdge.request(requester_id=requester_id, recipient_id=recipient_id)
    session.add(edge)
    session.flush()
    return edge


def accept_friend_request(
    *,
    session: Session,
    requester_id: UUID,
    recipient_id: UUID,
) -> FriendEdge:
    """
    Move a pending request from requester to recipient to accepted.

    Parameters:
        session (Session): The database session.
        requester_id (UUID): The ID of the user who sent the request.
        recipient_id (UUID): The ID of the user who received the request.
    Returns:
        FriendEdge: The accepted edge.
    Raises:
        NoResultFound: If no pending request exists in that direction.
    """
    edge = session.exec(
        select(FriendEdge).where(
            FriendEdge.requester_id == requester_id,
            FriendEdge.recipient_id == recipient_id,
            col(FriendEdge.status) == FriendStatus.PENDING,
        )
    ).one()
    edge.status = FriendStatus.ACCEPTED
    session.add(edge)
    session.flush()
    return edge


def delete_friend_request(
    *,
    session: Session,
    requester_id: UUID,
    recipient_id: UUID,
) -> FriendEdge:
    """
    Delete a pending friend request sent from one user to another.

    Parameters:
        session (Session): The database session.
        requester_id (UUID): The ID of the user who sent the request.
        recipient_id (UUID): The ID of the user who received the request.
    Returns:
        FriendEdge: The deleted edge.
    Raises:
        NoResultFound: If no pending request exists in that direction.
    """
    edge = session.exec(
        select(FriendEdge).where(
            FriendEdge.requester_id == requester_id,
            FriendEdge.recipient_id == recipient_id,
            col(FriendEdge.status) == FriendStatus.PENDING,
        )
    ).one()
    session.delete(edge)
    session.flush()
    return edge


def delete_friendship(
    *,
    session: Session,
    user_id: UUID,
    friend_id: UUID,
) -> FriendEdge:
    """
    Delete an accepted friendship. Either party may do this.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user removing the friendship.
        friend_id (UUID): The ID of the user to be removed as a friend.
    Returns:
        FriendEdge: The deleted edge.
    Raises:
        NoResultFound: If the users are not friends.
    """
    user_low_id, user_high_id = canonical_pair(user_id, friend_id)
    edge = session.exec(
        select(FriendEdge).where(
            FriendEdge.user_low_id == user_low_id,
            FriendEdge.user_high_id == user_high_id,
            col(FriendEdge.status) == FriendStatus.ACCEPTED,
        )
    ).one()
    session.delete(edge)
    session.flush()
    return edge


def are_users_friends(
    *,
    session: Session,
    user_id: UUID,
    friend_id: UUID,
) -> bool:
    edge = get_edge_between(session=session, user_id=user_id, other_id=friend_id)
    return edge is not None and edge.status == FriendStatus.ACCEPTED


def has_sent_friend_request(
    *,
    session: Session,
    requester_id: UUID,
    recipient_id: UUID,
) -> bool:
    edge = get_edge_between(
        session=session, user_id=requester_id, other_id=recipient_id
    )
    return (
        edge is not None
        and edge.status == FriendStatus.PENDING
        and edge.requester_id == requester_id
    )


def get_friends(*, session: Session, user_id: UUID) -> list[Profile]:
    """
    Get the profiles connected to a user by an accepted edge.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user whose friends are to be retrieved.
    Returns:
        list[Profile]: The friends, ordered by username.
    """
    stmt = (
        select(Profile)
        .join(
            FriendEdge,
            or_(
                (col(FriendEdge.requester_id) == user_id)
                & (col(FriendEdge.recipient_id) == Profile.id),
                (col(FriendEdge.recipient_id) == user_id)
                & (col(FriendEdge.requester_id) == Profile.id),
            ),
        )
        .where(col(FriendEdge.status) == FriendStatus.ACCEPTED)
        .order_by(col(Profile.username))
    )
    return list(session.exec(stmt).all())


def get_incoming_requests(*, session: Session, user_id: UUID) -> list[Profile]:
    """
    Get the profiles that have a pending request out to the user.
    """
    stmt = (
        select(Profile)
        .join(FriendEdge, col(FriendEdge.requester_id) == Profile.id)
        .where(
            FriendEdge.recipient_id == user_id,
            col(FriendEdge.status) == FriendStatus.PENDING,
        )
        .order_by(col(FriendEdge.created_at).desc())
    )
    return list(session.exec(stmt).all())


def get_outgoing_requests(*, session: Session, user_id: UUID) -> list[Profile]:
    """
    Get the profiles the user has a pending request out to.
    """
    stmt = (
        select(Profile)
        .join(FriendEdge, col(FriendEdge.recipient_id) == Profile.id)
        .where(
            FriendEdge.requester_id == user_id,
            col(FriendEdge.status) == FriendStatus.PENDING,
        )
        .order_by(col(FriendEdge.created_at).desc())
    )
    return list(session.exec(stmt).all())


def get_relationship(
    *,
    session: Session,
    viewer_id: UUID | None,
    other_id: UUID,
) -> Relationship:
    """
    Describe how the viewer relates to another profile.

    Parameters:
        session (Session): The database session.
        viewer_id (UUID | None): The viewer, None when anonymous.
        other_id (UUID): The profile being looked at.
    Returns:
        Relationship: NONE, PENDING_SENT, PENDING_RECEIVED, FRIENDS or SELF.
    """
    if viewer_id is None:
        return Relationship.NONE
    if viewer_id == other_id:
        return Relationship.SELF
    edge = get_edge_between(session=session, user_id=viewer_id, other_id=other_id)
    if edge is None:
        return Relationship.NONE
    if edge.status == FriendStatus.ACCEPTED:
        return Relationship.FRIENDS
    if edge.requester_id == viewer_id:
        return Relationship.PENDING_SENT
    return Relationship.PENDING_RECEIVED
