# Services package.
#
#   comment_service  — list/create/update/delete handlers for Comment
#
# Services receive their DAO at construction time so the router layer
# (via ``get_comment_service``) decides which storage stack backs a
# request, and tests can substitute a mock DAO.
