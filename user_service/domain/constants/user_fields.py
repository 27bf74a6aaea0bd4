"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    AGE = "age"
    EMAIL = "email"
    
    # Fields a client may set on create or update
    UPDATABLE = (NAME, AGE, EMAIL)
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
