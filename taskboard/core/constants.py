"""Core constants: conversational sentinels and fixed assistant replies.

Single source of truth for the literal strings exchanged with chat clients.
"""

# Control messages sent by the chat client in place of free text.
CONFIRM_SENTINEL = "USER_CONFIRMED_PROPOSAL"
CANCEL_SENTINEL = "USER_CANCELLED_PROPOSAL"

# Length of the id prefix shown in task summaries.
SHORT_ID_LENGTH = 6

UPSTREAM_FAILURE_REPLY = (
    "Sorry, I'm having trouble reaching my language service right now. "
    "Please try again in a moment."
)
MALFORMED_REPLY = "I had a little trouble understanding that. Could you try rephrasing?"
NO_PENDING_PROPOSAL_REPLY = "There is no pending proposal to confirm."
PROPOSAL_PENDING_REPLY = (
    "Please confirm or cancel the pending proposal before sending a new request."
)
NO_TASKS_FOUND_REPLY = "I couldn't find any tasks matching your criteria."
FALLBACK_CHAT_REPLY = "I'm not sure how to help with that yet."
SIGNATURE_INVALID_REPLY = (
    "I couldn't verify that proposal, so nothing was changed. Please ask again."
)
CANCELLED_REPLY_TEMPLATE = "Okay, {user}, I've cancelled that. What would you like to do next?"
