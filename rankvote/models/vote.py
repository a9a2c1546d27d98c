from rankvote.extensions import db


class Vote(db.Model):
    __tablename__ = "votes"
    __table_args__ = (
        db.CheckConstraint(
            "first_choice_id != voter_id AND second_choice_id != voter_id "
            "AND third_choice_id != voter_id",
            name="ck_votes_no_self_vote",
        ),
        db.CheckConstraint(
            "first_choice_id != second_choice_id "
            "AND second_choice_id != third_choice_id "
            "AND third_choice_id != first_choice_id",
            name="ck_votes_distinct_choices",
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    voter_id = db.Column(
        db.Integer, db.ForeignKey("guests.id"), unique=True, nullable=False, index=True
    )
    first_choice_id = db.Column(db.Integer, db.ForeignKey("guests.id"), nullable=False)
    second_choice_id = db.Column(db.Integer, db.ForeignKey("guests.id"), nullable=False)
    third_choice_id = db.Column(db.Integer, db.ForeignKey("guests.id"), nullable=False)
    submitted_at = db.Column(db.DateTime, nullable=False, index=True)
