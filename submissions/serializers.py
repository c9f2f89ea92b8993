from rest_framework import serializers

from assignments.models import Assignments
from problems.models import Problems
from .models import Correction, Submission


class SubmissionCreateSerializer(serializers.ModelSerializer):
    """Student code for one problem, optionally answering an activity."""

    problem_id = serializers.IntegerField(
        min_value=1,
        error_messages={
            'min_value': 'problem_id is required!',
            'required': 'problem_id is required!'
        }
    )
    assignment_id = serializers.IntegerField(required=False, allow_null=True)

    language_type = serializers.IntegerField(
        min_value=0,
        max_value=4,
        error_messages={
            'invalid': 'invalid data!',
            'required': 'post data missing!',
            'min_value': 'not allowed language',
            'max_value': 'not allowed language'
        }
    )

    class Meta:
        model = Submission
        fields = ['problem_id', 'assignment_id', 'language_type', 'source_code']
        # only these are accepted; user and status come from the server

    def validate_source_code(self, value):
        if not value.strip():
            raise serializers.ValidationError('source code is empty')
        return value

    def validate(self, attrs):
        user = self.context['request'].user
        assignment_id = attrs.get('assignment_id')

        assignment = None
        if assignment_id is not None:
            assignment = (
                Assignments.objects.select_related('course')
                .filter(pk=assignment_id)
                .first()
            )
            if assignment is None:
                raise serializers.ValidationError({'assignment_id': 'Homework not found.'})
            course = assignment.course
            if not (course.is_staff_member(user) or course.has_student(user)):
                raise serializers.ValidationError({'assignment_id': 'You are not in this course.'})
            if assignment.problem_id != attrs['problem_id']:
                raise serializers.ValidationError({'problem_id': 'Problem is not part of this homework.'})
            problem = assignment.problem
        else:
            problem = Problems.objects.visible_to(user).filter(pk=attrs['problem_id']).first()
            if problem is None:
                raise serializers.ValidationError({'problem_id': 'Problem not found.'})

        attrs['_problem'] = problem
        attrs['_assignment'] = assignment
        return attrs

    def create(self, validated_data):
        return Submission.objects.create(
            user=self.context['request'].user,
            problem=validated_data['_problem'],
            assignment=validated_data['_assignment'],
            language_type=validated_data['language_type'],
            source_code=validated_data['source_code'],
        )


class CorrectionSerializer(serializers.ModelSerializer):
    test_case_idx = serializers.IntegerField(source='test_case.idx', read_only=True, default=None)
    status_display = serializers.CharField(source='get_status_display', read_only=True)

    class Meta:
        model = Correction
        fields = ['id', 'test_case_idx', 'token', 'status', 'status_display', 'judged_at']


class SubmissionListSerializer(serializers.ModelSerializer):
    user = serializers.SerializerMethodField()
    problem_id = serializers.IntegerField(read_only=True)
    assignment_id = serializers.IntegerField(read_only=True, allow_null=True)
    status_display = serializers.SerializerMethodField()

    class Meta:
        model = Submission
        fields = [
            'id', 'problem_id', 'assignment_id', 'user',
            'language_type', 'status', 'status_display',
            'created_at', 'judged_at',
        ]

    def get_user(self, obj):
        return {
            'id': str(obj.user.id),
            'username': obj.user.username,
            'real_name': getattr(obj.user, 'real_name', obj.user.username)
        }

    def get_status_display(self, obj):
        """'Pending' until the submission is judged."""
        return obj.get_status_display() if obj.status is not None else 'Pending'


class SubmissionDetailSerializer(SubmissionListSerializer):
    corrections = CorrectionSerializer(many=True, read_only=True)

    class Meta(SubmissionListSerializer.Meta):
        fields = SubmissionListSerializer.Meta.fields + ['source_code', 'corrections']
